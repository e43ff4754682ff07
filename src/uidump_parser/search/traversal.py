"""在布局树中搜索节点"""
import logging
from collections.abc import Iterator
from xml.etree.ElementTree import Element

from uidump_parser.common.attribute_filter import NO_FILTER, AttributeFilter, passes
from uidump_parser.common.criterion import Criterion
from uidump_parser.common.query import Query
from uidump_parser.search.formatter import format_node

logger = logging.getLogger(__name__)


def iter_nodes(root: Element | None) -> Iterator[Element]:
    """先序深度优先遍历以 root 为根的子树，每个节点恰好访问一次

    与 Element.iter 不同，这里不按 tag 过滤，hierarchy 等根节点也会被访问

    >>> from xml.etree.ElementTree import fromstring
    >>> s = "<a><b><c/></b><d/></a>"
    >>> [n.tag for n in iter_nodes(fromstring(s))]
    ['a', 'b', 'c', 'd']

    Args:
        root (Element | None): 根节点，为空时不产生任何节点

    Yields:
        Element: 节点
    """
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # 逆序入栈，保证子节点从左到右出栈
        stack.extend(reversed(node))


def match_nodes(
    root: Element | None,
    criterion: Criterion,
    identifier: str = "",
    attribute_filter: AttributeFilter | None = NO_FILTER,
) -> Iterator[Element]:
    """按先序返回同时满足 criterion 与属性过滤器的节点

    Args:
        root (Element | None): 根节点
        criterion (Criterion): 主搜索条件
        identifier (str): 标识符，Criterion.ANY 时忽略
        attribute_filter (AttributeFilter | None): 附加的属性过滤器

    Yields:
        Element: 匹配的节点
    """
    for node in iter_nodes(root):
        if criterion(node, identifier) and passes(node, attribute_filter):
            yield node


def find_by_resource_id(
    root: Element | None,
    resource_id: str,
    attribute_filter: AttributeFilter | None = NO_FILTER,
    print_only: str | None = None,
) -> Iterator[str]:
    for node in match_nodes(root, Criterion.ID, resource_id, attribute_filter):
        yield format_node(node, print_only)


def find_by_class(
    root: Element | None,
    class_name: str,
    attribute_filter: AttributeFilter | None = NO_FILTER,
    print_only: str | None = None,
) -> Iterator[str]:
    for node in match_nodes(root, Criterion.CLASS, class_name, attribute_filter):
        yield format_node(node, print_only)


def find_by_text(
    root: Element | None,
    text: str,
    attribute_filter: AttributeFilter | None = NO_FILTER,
    print_only: str | None = None,
) -> Iterator[str]:
    for node in match_nodes(root, Criterion.TEXT, text, attribute_filter):
        yield format_node(node, print_only)


def find_by_filter(
    root: Element | None,
    attribute_filter: AttributeFilter | None,
    print_only: str | None = None,
) -> Iterator[str]:
    """输出所有通过属性过滤器的节点"""
    for node in match_nodes(root, Criterion.ANY, "", attribute_filter):
        yield format_node(node, print_only)


def search(root: Element | None, query: Query) -> Iterator[str]:
    """根据搜索配置选择对应的搜索方式

    Args:
        root (Element | None): 根节点
        query (Query): 搜索配置

    Yields:
        str: 每个匹配节点的输出文本
    """
    logger.debug(f"search with {query}")
    match query.criterion:
        case Criterion.ID:
            yield from find_by_resource_id(
                root, query.identifier, query.attribute_filter, query.print_only
            )
        case Criterion.CLASS:
            yield from find_by_class(
                root, query.identifier, query.attribute_filter, query.print_only
            )
        case Criterion.TEXT:
            yield from find_by_text(
                root, query.identifier, query.attribute_filter, query.print_only
            )
        case Criterion.ANY:
            yield from find_by_filter(root, query.attribute_filter, query.print_only)
