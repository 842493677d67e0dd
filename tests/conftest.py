from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys

import pytest
from pypdf.generic import ArrayObject, DictionaryObject, IndirectObject, NameObject, NumberObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfobjx import Name, Reference  # noqa: E402


@pytest.fixture()
def page_dictionary() -> dict:
    return {
        "Type": Name("Page"),
        "Parent": Reference(2, 0),
        "MediaBox": [0, 0, 595.5, 842],
    }


@pytest.fixture()
def ist_timestamp() -> datetime:
    return datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=5, minutes=30)))


@pytest.fixture()
def pypdf_page() -> DictionaryObject:
    return DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Page"),
            NameObject("/Parent"): IndirectObject(2, 0, None),
            NameObject("/MediaBox"): ArrayObject(
                [NumberObject(0), NumberObject(0), NumberObject(612), NumberObject(792)]
            ),
        }
    )
