"""
Module-level operations bound to the default gazetteer and generator.

    >>> import idcn
    >>> idcn.is_valid("110101199003077758")
    True
    >>> idcn.resolve_area("310000")
    Area(province='上海市', city='', district='')
"""

import functools
from datetime import date
from typing import Optional

from idcn.config.settings import get_generator_seed
from idcn.core.address import AddressResolver
from idcn.core.info import IdCardInfoExtractor, IdentityInfo
from idcn.core.synthetic.id_card_generator import GenerationConstraints, IdCardGenerator
from idcn.gazetteer.base import Gazetteer
from idcn.gazetteer.default import get_default_gazetteer
from idcn.gazetteer.models import Area


@functools.lru_cache(maxsize=1)
def get_default_generator() -> IdCardGenerator:
    """Generator over the default gazetteer, seeded from IDCN_GENERATOR_SEED."""
    return IdCardGenerator(get_default_gazetteer(), seed=get_generator_seed())


def resolve_area(code: str, gazetteer: Optional[Gazetteer] = None) -> Area:
    """Resolve a 6-digit region code (or the prefix of an identity number).

    Raises:
        InvalidLengthError: Fewer than 6 characters.
        InvalidFormatError: Non-digit in the first 6 characters.
        UnknownRegionError: No data for the code in any epoch.
    """
    return AddressResolver(gazetteer or get_default_gazetteer()).resolve_str(code)


def extract_info(
    raw: str,
    gazetteer: Optional[Gazetteer] = None,
    today: Optional[date] = None,
) -> IdentityInfo:
    """Extract identity information from a valid number.

    Raises:
        IdCardError: If the number is not valid.
    """
    return IdCardInfoExtractor(gazetteer or get_default_gazetteer()).extract(raw, today=today)


def generate(constraints: Optional[GenerationConstraints] = None) -> str:
    """Generate a number honoring the constraints; empty string on failure."""
    return get_default_generator().generate(constraints)


def fake_id() -> str:
    """Generate a random 18-digit number."""
    return generate()
