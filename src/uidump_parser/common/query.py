"""定义数据类 Query"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from uidump_parser.common.attribute_filter import NO_FILTER, AttributeFilter
from uidump_parser.common.criterion import Criterion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
    """一次搜索的完整配置

    criterion 与 identifier 决定主搜索条件，attribute_filter 为附加的属性过滤器，
    print_only 不为空时只输出匹配节点的该属性
    """

    criterion: Criterion
    identifier: str = ""
    attribute_filter: AttributeFilter = NO_FILTER
    print_only: str | None = None

    @classmethod
    def from_options(
        cls,
        resource_id: str | None = None,
        class_name: str | None = None,
        text: str | None = None,
        attribute_filter: AttributeFilter = NO_FILTER,
        print_only: str | None = None,
    ) -> Query | None:
        """根据命令行参数构造搜索配置

        按 resource-id、class、text 的优先级选取第一个非空的搜索条件，
        其余条件被忽略。三者都为空时，只有生效的属性过滤器才能单独构成搜索

        >>> Query.from_options(resource_id="a", class_name="b").criterion
        ID
        >>> Query.from_options() is None
        True

        Args:
            resource_id (str | None): --resource-id
            class_name (str | None): --class
            text (str | None): --text
            attribute_filter (AttributeFilter): --filter-attribute
            print_only (str | None): --print-only

        Returns:
            Query | None: 搜索配置，没有任何搜索条件时返回空
        """
        print_only = print_only or None
        for criterion, identifier in (
            (Criterion.ID, resource_id),
            (Criterion.CLASS, class_name),
            (Criterion.TEXT, text),
        ):
            if identifier:
                return cls(criterion, identifier, attribute_filter, print_only)
        if attribute_filter.active:
            return cls(Criterion.ANY, "", attribute_filter, print_only)
        return None
