"""
仿真数据合成模块

主要组件:
- BaseSyntheticGenerator: 仿真数据生成器基类
- IdCardGenerator: 身份证号生成器
- GenerationConstraints: 生成条件
"""

from idcn.core.synthetic.base import BaseSyntheticGenerator
from idcn.core.synthetic.id_card_generator import GenerationConstraints, IdCardGenerator

__all__ = [
    "BaseSyntheticGenerator",
    "GenerationConstraints",
    "IdCardGenerator",
]
