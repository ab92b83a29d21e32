"""Pytest fixtures and configuration."""

from datetime import date

import pytest

from idcn.core.synthetic.id_card_generator import IdCardGenerator
from idcn.gazetteer.default import get_default_gazetteer
from idcn.gazetteer.memory import InMemoryGazetteer
from idcn.gazetteer.models import Area, TimelineEntry


@pytest.fixture
def today():
    """Fixed reference date for date-dependent assertions."""
    return date(2024, 6, 15)


@pytest.fixture
def valid_id_cards():
    """Valid identity numbers."""
    return [
        "110101199003077758",  # Beijing 东城区, 1990-03-07, male
        "110101199003077715",  # Beijing 东城区, 1990-03-07, male
        "11010119900307109X",  # uppercase X check character
        "11010119900307109x",  # lowercase x check character
        "110101900307775",     # 15-digit form of 110101199003077758
    ]


@pytest.fixture
def invalid_id_cards():
    """Invalid identity numbers."""
    return [
        "110101199003077750",  # Invalid checksum
        "12345678901234567A",  # Invalid check character
        "11010119900307",      # Too short
        "110101199013077758",  # Month 13
        "1101011990030777X",   # 17 characters
    ]


@pytest.fixture
def default_gazetteer():
    """The bundled gazetteer."""
    return get_default_gazetteer()


@pytest.fixture
def small_gazetteer():
    """A hand-built gazetteer exercising every data epoch."""
    return InMemoryGazetteer(
        current={
            110000: "北京市",
            110100: "北京市",
            110101: "东城区",
            110102: "西城区",
            440000: "广东省",
            440300: "深圳市",
            440305: "南山区",
            440306: "宝安区",
            460000: "海南省",
            810000: "香港特别行政区",
        },
        timeline={
            110104: [
                TimelineEntry(name="宣武区", start_year=1958, end_year=2010),
            ],
            320803: [
                TimelineEntry(name="楚州区", start_year=2001, end_year=2012),
                TimelineEntry(name="淮安区", start_year=2012),
            ],
        },
        history={
            110103: Area(province="北京市", city="北京市", district="崇文区"),
            110104: Area(province="北京市", city="北京市", district="宣武区（旧）"),
            990101: Area(province="测试省", city="测试市", district="测试区"),
        },
    )


@pytest.fixture
def seeded_generator(default_gazetteer):
    """Deterministic generator over the bundled gazetteer."""
    return IdCardGenerator(default_gazetteer, seed=20240615)
