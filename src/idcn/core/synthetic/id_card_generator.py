"""
身份证号生成器

按条件生成可通过校验的中国身份证号码，用于测试数据构造。

注意：此生成的号码仅用于测试和开发，不具备任何法律效力。

特性:
- 指定地区（省、市、区县任意一级的官方全称）
- 指定出生日期（年 / 年月 / 年月日）
- 指定性别
- 15 位或 18 位输出，18 位带正确校验码
"""

import random
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from idcn.core.address import RegionTier, classify_tier, is_district_code
from idcn.core.checksum import calculate_check_code
from idcn.core.synthetic.base import BaseSyntheticGenerator
from idcn.gazetteer.base import Gazetteer
from idcn.logging.setup import get_logger
from idcn.utils.text import mask_id_card, sanitize_for_logging

logger = get_logger(__name__)

# 随机出生年份下限
MIN_RANDOM_YEAR = 1950

# 指定年份可接受的下限，低于此值重新随机
MIN_ACCEPTED_YEAR = 1900

# 随机日期只取 1-28 日，避免处理各月天数
MAX_RANDOM_DAY = 28


@dataclass
class GenerationConstraints:
    """生成条件

    Attributes:
        eighteen: 是否生成18位号码（否则15位）
        address: 省市县三级地区官方全称，如"北京市"、"深圳市"、"东城区"；None 则随机
        birthday: 出生日期，支持 "2000"、"198801"、"19990101"；None 则随机
        sex: 1 男，0 女，None 随机
    """

    eighteen: bool = True
    address: Optional[str] = None
    birthday: Optional[str] = None
    sex: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate constraint values."""
        if self.sex not in (None, 0, 1):
            raise ValueError(f"Sex must be 0, 1 or None, got {self.sex!r}")


def _to_int(text: str) -> int:
    """解析数字字段，非数字返回 0（随后会被当作越界重新随机）"""
    if text.isascii() and text.isdigit():
        return int(text)
    return 0


class IdCardGenerator(BaseSyntheticGenerator):
    """中国身份证号生成器

    地区码取自 gazetteer 的现行区划表，因此生成的号码总能解析出地区。

    注意：生成的号码仅供测试使用，不具备法律效力。

    Example:
        >>> gen = IdCardGenerator(get_default_gazetteer(), seed=42)
        >>> number = gen.generate(GenerationConstraints(address="深圳市", sex=1))
        >>> number[:4]
        '4403'
    """

    def __init__(
        self,
        gazetteer: Gazetteer,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """初始化身份证号生成器

        Args:
            gazetteer: 地区数据源
            seed: 随机种子（用于确定性生成）
            rng: 外部提供的 random.Random 实例
        """
        super().__init__(seed=seed, rng=rng)
        self.gazetteer = gazetteer

    def generate(
        self,
        constraints: Optional[GenerationConstraints] = None,
        today: Optional[date] = None,
    ) -> str:
        """按条件生成身份证号

        Args:
            constraints: 生成条件，None 表示全部随机的18位号码
            today: 参考日期（出生日期不会晚于此日），默认今天

        Returns:
            生成的号码；现行区划表中没有任何区县级代码时返回空字符串
        """
        if constraints is None:
            constraints = GenerationConstraints()
        if today is None:
            today = date.today()

        # 1. 地址码
        region_code = self._generate_region_code(constraints.address)
        if not region_code:
            logger.warning(
                "No district-level region code available, generation failed",
                extra={
                    "event": "generation_failed",
                    "address": sanitize_for_logging(constraints.address or ""),
                },
            )
            return ""

        # 2. 出生日期码
        birth_code = self._generate_birth_code(constraints.birthday, today)

        # 3. 顺序码
        order_code = self._generate_order_code(constraints.sex)

        if not constraints.eighteen:
            # 15位使用6位年月日（去掉世纪）
            result = region_code + birth_code[2:] + order_code
        else:
            body = region_code + birth_code + order_code
            result = body + calculate_check_code(body)

        logger.debug(
            "Identity number generated",
            extra={"event": "id_card_generated", "id_card": mask_id_card(result)},
        )
        return result

    def generate_id(
        self,
        eighteen: bool = True,
        address: Optional[str] = None,
        birthday: Optional[str] = None,
        sex: Optional[int] = None,
    ) -> str:
        """generate() 的关键字参数形式"""
        return self.generate(
            GenerationConstraints(eighteen=eighteen, address=address, birthday=birthday, sex=sex)
        )

    def _generate_region_code(self, address: Optional[str]) -> str:
        """生成地址码"""
        if not address:
            return self._random_district_code()

        matched = self.gazetteer.find_code(address)
        if matched is None:
            # 地址不存在，随机生成
            logger.debug(
                "Address not found in current map, using random district",
                extra={"event": "address_not_found", "address": sanitize_for_logging(address)},
            )
            return self._random_district_code()

        tier = classify_tier(matched)
        if tier is RegionTier.PROVINCE:
            # 省级：随机获取该省下的区县
            return self._random_district_code(lambda code: code // 10000 == matched // 10000)
        if tier is RegionTier.CITY:
            # 市级：随机获取该市下的区县
            return self._random_district_code(lambda code: code // 100 == matched // 100)

        # 区县级及港澳台：直接使用
        return f"{matched:06d}"

    def _random_district_code(self, predicate: Optional[Callable[[int], bool]] = None) -> str:
        """随机选择一个区县级地址码

        predicate 筛选后没有候选时退回到全部区县中随机选择。
        """
        districts = [code for code in self.gazetteer.current_codes() if is_district_code(code)]
        if predicate is not None:
            matched = [code for code in districts if predicate(code)]
            if matched:
                districts = matched

        if not districts:
            return ""
        return f"{self._choice(districts):06d}"

    def _generate_birth_code(self, birthday: Optional[str], today: date) -> str:
        """生成出生日期码（YYYYMMDD）"""
        birthday = birthday or ""

        if len(birthday) == 8:
            year = _to_int(birthday[0:4])
            month = _to_int(birthday[4:6])
            day = _to_int(birthday[6:8])
        elif len(birthday) == 6:
            year = _to_int(birthday[0:4])
            month = _to_int(birthday[4:6])
            day = self._rand_range(1, MAX_RANDOM_DAY)
        elif len(birthday) == 4:
            year = _to_int(birthday)
            month = self._rand_range(1, 12)
            day = self._rand_range(1, MAX_RANDOM_DAY)
        else:
            # 随机生成 1950 到去年之间的日期（确保不会是未来）
            year = self._rand_range(MIN_RANDOM_YEAR, today.year - 1)
            month = self._rand_range(1, 12)
            day = self._rand_range(1, MAX_RANDOM_DAY)

        if year < MIN_ACCEPTED_YEAR or year > today.year:
            year = self._rand_range(MIN_RANDOM_YEAR, today.year - 1)

        if month < 1 or month > 12:
            month = self._rand_range(1, 12)

        if day < 1 or day > MAX_RANDOM_DAY:
            day = self._rand_range(1, MAX_RANDOM_DAY)

        # 当前年份：月日不能超过今天（在范围修正之后执行，修正结果也受约束）
        if year == today.year:
            if month > today.month:
                month = self._rand_range(1, today.month)
            if month == today.month and day > today.day:
                day = self._rand_range(1, today.day)

        return f"{year:04d}{month:02d}{day:02d}"

    def _generate_order_code(self, sex: Optional[int]) -> str:
        """生成顺序码（3位，末位奇数为男，偶数为女）"""
        order = self._rand_range(1, 999)

        if sex == 1 and order % 2 == 0:
            order += 1
            if order > 999:
                order = 999
        elif sex == 0 and order % 2 == 1:
            order += 1
            if order > 999:
                order = 998

        return f"{order:03d}"
