"""
Region code resolution.

Resolves a 6-digit region code to a province/city/district triple by
consulting the gazetteer's three data epochs in a fixed order:

1. the current administrative map
2. the most recent timeline entry
3. the archival snapshot's most specific tier name

Each tier is resolved independently from its own code. If no province name
can be found that way, the archival snapshot's full triple for the original
code is used as a last resort.
"""

from enum import Enum
from typing import Callable, Optional

from idcn.core.errors import InvalidFormatError, InvalidLengthError, UnknownRegionError
from idcn.gazetteer.base import Gazetteer
from idcn.gazetteer.models import Area
from idcn.logging.setup import get_logger

logger = get_logger(__name__)


class RegionTier(str, Enum):
    """Administrative tier encoded by a region code."""

    PROVINCE = "province"
    CITY = "city"
    DISTRICT = "district"
    SPECIAL = "special"  # 港澳台


def classify_tier(code: int) -> RegionTier:
    """Classify a region code by its trailing zeros.

    Examples:
        >>> classify_tier(440000)
        <RegionTier.PROVINCE: 'province'>
        >>> classify_tier(440300)
        <RegionTier.CITY: 'city'>
        >>> classify_tier(440305)
        <RegionTier.DISTRICT: 'district'>
        >>> classify_tier(810000)
        <RegionTier.SPECIAL: 'special'>
    """
    if code // 100000 == 8:
        return RegionTier.SPECIAL
    if code % 10000 == 0:
        return RegionTier.PROVINCE
    if code % 100 == 0:
        return RegionTier.CITY
    return RegionTier.DISTRICT


def is_district_code(code: int) -> bool:
    return code % 100 != 0


def province_code_of(code: int) -> int:
    return (code // 10000) * 10000


def city_code_of(code: int) -> int:
    return (code // 100) * 100


def parse_region_code(code: str) -> int:
    """Parse the first 6 characters of a region code or identity number.

    Raises:
        InvalidLengthError: If fewer than 6 characters are given.
        InvalidFormatError: If the 6-character prefix is not all digits.
    """
    if len(code) < 6:
        raise InvalidLengthError("地址码长度不足6位")
    prefix = code[:6]
    if not all("0" <= c <= "9" for c in prefix):
        raise InvalidFormatError("地址码格式不正确")
    return int(prefix)


class AddressResolver:
    """Resolve region codes against a gazetteer.

    Example:
        >>> resolver = AddressResolver(get_default_gazetteer())
        >>> resolver.resolve(110101)
        Area(province='北京市', city='北京市', district='东城区')
    """

    def __init__(self, gazetteer: Gazetteer) -> None:
        self.gazetteer = gazetteer
        # Lookups tried in order until one yields a non-empty name
        self._name_sources: tuple[Callable[[int], Optional[str]], ...] = (
            self._from_current,
            self._from_timeline,
            self._from_history,
        )

    def _from_current(self, code: int) -> Optional[str]:
        return self.gazetteer.current_name(code)

    def _from_timeline(self, code: int) -> Optional[str]:
        entries = self.gazetteer.timeline(code)
        if not entries:
            return None
        return entries[0].name

    def _from_history(self, code: int) -> Optional[str]:
        return self.gazetteer.historical_name(code)

    def resolve_name(self, code: int) -> str:
        """Resolve the name of a single code, empty string if unknown."""
        for position, source in enumerate(self._name_sources):
            name = source(code)
            if name:
                if position > 0:
                    logger.debug(
                        "Region name resolved from fallback source",
                        extra={
                            "event": "region_name_fallback",
                            "code": f"{code:06d}",
                            "source": source.__name__.removeprefix("_from_"),
                        },
                    )
                return name
        return ""

    def resolve(self, code: int) -> Area:
        """Resolve a region code to its province/city/district triple.

        Args:
            code: 6-digit region code as an integer.

        Returns:
            The resolved Area. City is empty for province-tier codes, district
            is empty for province- and city-tier codes.

        Raises:
            UnknownRegionError: If no province can be resolved and the archival
                snapshot has no entry for the code.
        """
        province_code = province_code_of(code)
        city_code = city_code_of(code)

        province = self.resolve_name(province_code)
        city = ""
        district = ""
        if city_code != province_code:
            city = self.resolve_name(city_code)
        if code != city_code and code != province_code:
            district = self.resolve_name(code)

        if province:
            return Area(province=province, city=city, district=district)

        area = self.gazetteer.historical_area(code)
        if area is not None:
            logger.debug(
                "Region resolved from archival snapshot",
                extra={"event": "region_history_fallback", "code": f"{code:06d}"},
            )
            return area

        raise UnknownRegionError(code)

    def resolve_str(self, code: str) -> Area:
        """Resolve a region code given as text (extra characters are ignored)."""
        return self.resolve(parse_region_code(code))
