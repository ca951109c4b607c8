import pytest

from feesim.schemas import FeeResult
from feesim.sepa import sepa_fee, sepa_total


@pytest.mark.parametrize("amount", [0, 0.01, 50, 199.99, 200])
@pytest.mark.parametrize("channel", ["digital", "branch"])
def test_first_transfer_of_day_promo(amount, channel):
    assert sepa_fee(amount, channel, True) == 0.02


def test_promo_limited_to_200():
    assert sepa_fee(200.01, "digital", True) == 1.99
    assert sepa_fee(250, "digital", True) == 1.99


def test_digital_channel():
    assert sepa_fee(500, "digital", False) == 1.99
    assert sepa_fee(20_000, "digital", False) == 1.99
    assert sepa_fee(20_000.01, "digital", False) == 25


def test_branch_channel():
    assert sepa_fee(500, "branch", False) == 3.99
    assert sepa_fee(20_000, "branch", False) == 3.99
    assert sepa_fee(25_000, "branch", False) == 50
    assert sepa_fee(25_000, "branch", True) == 50


def test_unknown_channel_priced_as_branch():
    assert sepa_fee(500, "teller", False) == 3.99


def test_sepa_total():
    assert sepa_total(100, "digital", False) == FeeResult(sender_fee=1.99, sender_pays_total=101.99)
    assert sepa_total(150, "branch", True) == FeeResult(sender_fee=0.02, sender_pays_total=150.02)
