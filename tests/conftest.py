from typing import List, Tuple

import pytest

from ipo_tracker.models import AngelRecord, IpoRecord
from ipo_tracker.sources.sample_data import sample_angel_payload, sample_ipo_payload
from ipo_tracker.util.normalization import parse_angel_records, parse_ipo_records


@pytest.fixture()
def sample_records() -> Tuple[List[IpoRecord], List[AngelRecord]]:
    return parse_ipo_records(sample_ipo_payload()), parse_angel_records(sample_angel_payload())
