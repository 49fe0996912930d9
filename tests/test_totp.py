"""
Totp generator / verifier, cross-checked against pyotp as an independent
RFC 4226/6238 implementation under the same clock conditions.
"""
import json

import pyotp
import pytest

from otp_engine import Clock, InvalidConfiguration, InvalidSecret, Totp
from tests.conftest import SHARED_SECRET


def reference_code(secret: str, counter: int, digits: int = 6) -> str:
    return pyotp.HOTP(secret, digits=digits).at(counter)


def test_uri(totp):
    assert totp.uri("john") == f"otpauth://totp/john?secret={SHARED_SECRET}"


def test_uri_encoding():
    totp = Totp(SHARED_SECRET)
    assert totp.uri("john#doe") == f"otpauth://totp/john%23doe?secret={SHARED_SECRET}"


def test_uri_keeps_secret_as_received():
    totp = Totp("b237-4tni q3hk-c446")
    assert totp.uri("john") == "otpauth://totp/john?secret=b237-4tni q3hk-c446"


def test_leading_zeros(clock):
    secret = "R5MB5FAQNX5UIPWL"
    clock.current_interval.return_value = 45187109
    our_otp = Totp(secret, clock).now()

    assert our_otp == reference_code(secret, 45187109)
    assert our_otp == "002941"


def test_custom_interval():
    totp = Totp(SHARED_SECRET, Clock(20))
    code = totp.now()
    assert len(code) == 6
    assert code.isdigit()


def test_custom_interval_matches_reference(base_time):
    clock = Clock(20)
    clock._now = lambda: base_time
    totp = Totp(SHARED_SECRET, clock)
    assert totp.now() == pyotp.TOTP(SHARED_SECRET, interval=20).at(base_time)


def test_now(totp, elapsed):
    our_otp = totp.now()
    assert our_otp == reference_code(SHARED_SECRET, elapsed(0))
    assert len(our_otp) == 6


def test_now_rereads_clock(totp, clock):
    clock.current_interval.return_value = 100
    first = totp.now()
    clock.current_interval.return_value = 101
    second = totp.now()
    assert first == reference_code(SHARED_SECRET, 100)
    assert second == reference_code(SHARED_SECRET, 101)
    assert clock.current_interval.call_count == 2


def test_custom_digits(clock):
    clock.current_interval.return_value = 45187109
    totp = Totp(SHARED_SECRET, clock, digits=8)
    assert totp.now() == reference_code(SHARED_SECRET, 45187109, digits=8)
    assert totp.verify(totp.now())


def test_at(totp):
    assert totp.at(0) == reference_code(SHARED_SECRET, 0)


def test_valid_otp(totp, elapsed):
    our_otp = totp.now()
    assert our_otp == reference_code(SHARED_SECRET, elapsed(0))
    assert totp.verify(our_otp)


@pytest.mark.parametrize("seconds", [10, 20, 25, 30])
def test_otp_within_window(totp, clock, elapsed, seconds):
    our_otp = totp.now()
    clock.current_interval.return_value = elapsed(seconds)
    assert totp.verify(our_otp), f"OTP should be valid after {seconds}s"


@pytest.mark.parametrize("seconds", [31, 40, 50, 59, 60, 61])
def test_otp_outside_window(totp, clock, elapsed, seconds):
    clock.current_interval.return_value = elapsed(0) - 1
    our_otp = totp.now()
    assert our_otp == reference_code(SHARED_SECRET, elapsed(0) - 1)
    clock.current_interval.return_value = elapsed(seconds)
    assert not totp.verify(our_otp), f"OTP should be invalid after {seconds}s"


class TestVerificationWindow:
    COUNTER = 1_000_000

    @pytest.fixture
    def code(self):
        return reference_code(SHARED_SECRET, self.COUNTER)

    def test_accepts_same_step(self, totp, clock, code):
        clock.current_interval.return_value = self.COUNTER
        assert totp.verify(code)

    def test_accepts_one_step_behind(self, totp, clock, code):
        clock.current_interval.return_value = self.COUNTER + 1
        assert totp.verify(code)

    def test_rejects_two_steps_behind(self, totp, clock, code):
        clock.current_interval.return_value = self.COUNTER + 2
        assert not totp.verify(code)

    def test_rejects_future_step(self, totp, clock, code):
        clock.current_interval.return_value = self.COUNTER - 1
        assert not totp.verify(code)

    def test_counter_zero(self, totp, clock):
        clock.current_interval.return_value = 0
        assert totp.verify(reference_code(SHARED_SECRET, 0))


@pytest.mark.parametrize("candidate", [
    None, 123456, b"123456", "", "abcdef", "12345", "1234567", "١٢٣٤٥٦", " 123456",
    "\ud800", "12345\udcff", json.loads('"\\ud800"'),
])
def test_verify_malformed_returns_false(totp, candidate):
    assert totp.verify(candidate) is False


@pytest.mark.parametrize("digits", [0, -1, False])
def test_invalid_digits(digits):
    with pytest.raises(InvalidConfiguration):
        Totp(SHARED_SECRET, digits=digits)


@pytest.mark.parametrize("secret", ["", "====", "0189"])
def test_invalid_secret(secret):
    with pytest.raises(InvalidSecret):
        Totp(secret)


def test_wipe(clock):
    with Totp(SHARED_SECRET, clock) as totp:
        totp.now()
    with pytest.raises(InvalidSecret):
        totp.now()


def test_repr_hides_secret():
    assert SHARED_SECRET not in repr(Totp(SHARED_SECRET))


class FixedInterval:
    """Clock-like object that does not subclass Clock."""

    def __init__(self, counter):
        self.counter = counter

    def current_interval(self) -> int:
        return self.counter


def test_accepts_any_interval_source():
    source = FixedInterval(45187109)
    totp = Totp("R5MB5FAQNX5UIPWL", source)
    assert totp.clock is source
    assert totp.now() == "002941"
    source.counter += 1
    assert totp.verify("002941")
    source.counter += 1
    assert not totp.verify("002941")
