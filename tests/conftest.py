import json
from pathlib import Path

import pytest

from feesim.schemas import BankProfile
from feesim.store import BankRuleStore

INDIVIDUAL_BANKS = [
    {
        "name": "Alpha Bank",
        "transferOut": {
            "SHA": [
                {"minAmount": 0, "maxAmount": 1000, "feeType": "fixed", "feeValue": 10, "additionalFee": 0},
                {"minAmount": 1000, "maxAmount": None, "feeType": "percentage", "feeValue": 0.003,
                 "additionalFee": 5, "minFee": 15, "maxFee": 120},
            ],
            "OUR": [
                {"minAmount": 0, "maxAmount": None, "feeType": "percentage", "feeValue": 0.004,
                 "additionalFee": 25, "minFee": 35, "maxFee": 350},
            ],
            "BEN": {"notice": "Charged to the beneficiary."},
            "special": {"T+0": 30, "T+1": 15, "T+2": 0},
        },
    },
    {
        "name": "Beta Bank",
        "resident": {
            "transferOut": {
                "SHA": [{"minAmount": 0, "maxAmount": None, "feeType": "fixed", "feeValue": 7, "additionalFee": 0}],
                "special": {"Express": 20},
            }
        },
        "non-resident": {
            "transferOut": {
                "SHA": [{"minAmount": 0, "maxAmount": None, "feeType": "fixed", "feeValue": 12, "additionalFee": 3}],
            }
        },
        "transferOut": {
            "SHA": [{"minAmount": 0, "maxAmount": None, "feeType": "fixed", "feeValue": 9, "additionalFee": 0}],
        },
    },
    {
        "name": "Universal Capital Bank AD",
        "transferOut": {
            "SHA": [
                {"minAmount": 0, "maxAmount": None, "feeType": "percentage", "feeValue": 0.002,
                 "additionalFee": 3, "minFee": 10, "maxFee": 100},
            ],
            "OUR": [{"minAmount": 0, "maxAmount": None, "feeType": "fixed", "feeValue": 25, "additionalFee": 0}],
            "BEN": [{"minAmount": 0, "maxAmount": None, "feeType": "fixed", "feeValue": 5, "additionalFee": 0}],
        },
    },
]

BUSINESS_BANKS = [
    {
        "name": "Alpha Bank",
        "transferOut": {
            "SHA": [{"minAmount": 0, "maxAmount": None, "feeType": "fixed", "feeValue": 20, "additionalFee": 5}],
        },
    },
]


@pytest.fixture
def store() -> BankRuleStore:
    return BankRuleStore({
        "individual": [BankProfile.from_dict(b) for b in INDIVIDUAL_BANKS],
        "business": [BankProfile.from_dict(b) for b in BUSINESS_BANKS],
    })


@pytest.fixture
def dataset_files(tmp_path: Path) -> dict:
    """Write the sample datasets to JSON files and return their paths."""
    individual = tmp_path / "individual.json"
    business = tmp_path / "business.json"
    individual.write_text(json.dumps(INDIVIDUAL_BANKS), encoding="utf-8")
    business.write_text(json.dumps(BUSINESS_BANKS), encoding="utf-8")
    return {"individual": individual, "business": business}
