"""Information extraction from a valid identity number."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Literal, Optional

from idcn.core.address import AddressResolver
from idcn.core.birthday import parse_birth_code
from idcn.core.checksum import calculate_check_code
from idcn.core.errors import UnknownRegionError
from idcn.core.validator import check_id_card
from idcn.gazetteer.base import Gazetteer
from idcn.gazetteer.models import Area
from idcn.logging.setup import get_logger
from idcn.utils.text import mask_id_card

logger = get_logger(__name__)

MALE = 1
FEMALE = 0


@dataclass(frozen=True)
class IdentityInfo:
    """Facts derived from an identity number.

    Attributes:
        card_no: Canonical 18-digit form.
        area: Region of registration, all-empty when unresolvable.
        age: Age in completed years.
        birthday: Birth date as YYYY-MM-DD.
        sex: 1 for male, 0 for female.
    """

    card_no: str
    area: Area
    age: int
    birthday: str
    sex: Literal[0, 1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "card_no": self.card_no,
            "area": self.area.to_dict(),
            "info": {"age": self.age, "birthday": self.birthday, "gender": self.sex},
        }


def calculate_age(birthday: date, today: Optional[date] = None) -> int:
    """Age in completed years on the reference date."""
    if today is None:
        today = date.today()
    age = today.year - birthday.year
    # 还没过生日
    if (today.month, today.day) < (birthday.month, birthday.day):
        age -= 1
    return age


def sex_of(order_code: str) -> Literal[0, 1]:
    """Sex encoded by a sequence code: odd last digit is male."""
    return MALE if int(order_code[-1]) % 2 == 1 else FEMALE


class IdCardInfoExtractor:
    """Derive age, birthday, sex, region and canonical form.

    Example:
        >>> extractor = IdCardInfoExtractor(get_default_gazetteer())
        >>> extractor.extract("110101199003077758").area.district
        '东城区'
    """

    def __init__(self, gazetteer: Gazetteer) -> None:
        self.resolver = AddressResolver(gazetteer)

    def extract(self, raw: str, today: Optional[date] = None) -> IdentityInfo:
        """Extract identity information.

        Args:
            raw: 15- or 18-digit identity number.
            today: Reference date for validation and age, defaults to today.

        Returns:
            IdentityInfo for the number.

        Raises:
            IdCardError: If the number is not valid. An unknown region is not
                an error here; the area is left empty instead.
        """
        if today is None:
            today = date.today()

        record = check_id_card(raw, today=today)

        try:
            area = self.resolver.resolve(int(record.region_code))
        except UnknownRegionError:
            logger.warning(
                "Region code unresolvable, using empty area",
                extra={"event": "unknown_region", "id_card": mask_id_card(raw)},
            )
            area = Area.empty()

        # check_id_card guarantees a real date here
        birthday = parse_birth_code(record.birth_code)

        card_no = raw
        if record.source_length == 15:
            card_no = record.body + calculate_check_code(record.body)

        return IdentityInfo(
            card_no=card_no,
            area=area,
            age=calculate_age(birthday, today=today),
            birthday=birthday.isoformat(),
            sex=sex_of(record.order_code),
        )
