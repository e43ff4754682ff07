"""定义枚举类 Criterion"""
from __future__ import annotations

import logging
from enum import Enum, auto
from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)


class Criterion(Enum):
    """用于表示搜索节点方式的枚举类，本质是一个谓词

    如 Criterion.ID 表示判断给定节点的 resource-id 属性是否与给定标识符相等。
    Criterion.ANY 不检查任何属性，只依靠附加的属性过滤器筛选节点

    成员的定义顺序即命令行参数的优先级
    """

    ID = auto()
    CLASS = auto()
    TEXT = auto()
    ANY = auto()

    @property
    def attribute(self) -> str | None:
        """与该 Criterion 比较的节点属性名"""
        match self:
            case Criterion.ID:
                return "resource-id"
            case Criterion.CLASS:
                return "class"
            case Criterion.TEXT:
                return "text"
            case Criterion.ANY:
                return None

    def __call__(self, node: Element, identifier: str = "") -> bool:
        """判断给定节点是否与 identifier 匹配

        >>> from xml.etree.ElementTree import fromstring
        >>> n = fromstring('<node text="Documents"/>')
        >>> Criterion.TEXT(n, "Documents")
        True
        >>> Criterion.ID(n, "Documents")
        False
        >>> Criterion.ANY(n)
        True

        Args:
            node (Element): 待判断节点
            identifier (str): 标识符

        Returns:
            bool: 返回匹配结果
        """
        if (attr := self.attribute) is None:
            return True
        value = node.get(attr)
        return value is not None and value == identifier

    def __repr__(self) -> str:
        return self.name
