"""定义数据类 AttributeFilter"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeFilter:
    """附加在搜索条件之上的属性过滤器

    要求节点的 name 属性存在且与 value 完全相等。name 或 value 为空时过滤器不生效，
    此时任何节点都能通过，而不是匹配空字符串
    """

    name: str = ""
    value: str = ""

    @property
    def active(self) -> bool:
        return self.name != "" and self.value != ""

    def __call__(self, node: Element) -> bool:
        """判断节点是否通过过滤器

        >>> from xml.etree.ElementTree import fromstring
        >>> n = fromstring('<node package="com.example"/>')
        >>> AttributeFilter("package", "com.example")(n)
        True
        >>> AttributeFilter("enabled", "true")(n)
        False
        >>> NO_FILTER(n)
        True

        Args:
            node (Element): 待判断节点

        Returns:
            bool: 是否通过
        """
        if not self.active:
            return True
        return node.get(self.name) == self.value

    @classmethod
    def parse(cls, expression: str | None) -> AttributeFilter:
        """从 name=value 形式的字符串中解析过滤器

        只在第一个 = 处分割，没有 = 时返回不生效的过滤器

        >>> AttributeFilter.parse("content-desc=a=b")
        AttributeFilter(name='content-desc', value='a=b')
        >>> AttributeFilter.parse("enabled").active
        False

        Args:
            expression (str | None): 命令行参数

        Returns:
            AttributeFilter: 过滤器
        """
        if expression is None:
            return NO_FILTER
        name, sep, value = expression.partition("=")
        if not sep:
            logger.warning(f"ignore malformed filter attribute: {expression}")
            return NO_FILTER
        return cls(name, value)

    def __str__(self) -> str:
        return f"{self.name}={self.value}" if self.active else ""


NO_FILTER = AttributeFilter()


def passes(node: Element, attribute_filter: AttributeFilter | None) -> bool:
    """判断节点是否通过可选的属性过滤器，过滤器为 None 时总是通过"""
    if attribute_filter is None:
        return True
    return attribute_filter(node)
