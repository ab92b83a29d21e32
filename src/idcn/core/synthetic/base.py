"""
仿真数据生成器基类

提供注入式随机源，测试时传入固定种子即可得到确定性输出。
"""

import random
import threading
from abc import ABC
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class BaseSyntheticGenerator(ABC):
    """仿真数据生成器基类

    随机源可以直接注入（rng），也可以由种子构造；两者都不提供时
    使用操作系统熵初始化。同一实例可被多个线程共享。

    Attributes:
        seed: 随机种子（None 表示未固定）
    """

    def __init__(self, *, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """初始化生成器

        Args:
            seed: 随机种子（用于确定性生成）
            rng: 外部提供的随机源，优先于 seed
        """
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)
        self._lock = threading.Lock()

    def _rand_range(self, low: int, high: int) -> int:
        """生成 [low, high] 范围内的随机整数

        low >= high 时直接返回 low。
        """
        if low >= high:
            return low
        with self._lock:
            return self._rng.randint(low, high)

    def _choice(self, items: Sequence[T]) -> T:
        """从非空序列中等概率选取一个元素"""
        with self._lock:
            return self._rng.choice(items)
