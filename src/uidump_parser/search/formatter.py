import logging
from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)


def format_node(node: Element, print_only: str | None = None) -> str:
    """将匹配到的节点转换成输出文本

    指定 print_only 时只输出该属性，属性不存在时输出提示信息；
    否则输出节点名与全部属性，并以空行结尾

    >>> from xml.etree.ElementTree import fromstring
    >>> n = fromstring('<node resource-id="a" text="hi"/>')
    >>> format_node(n, "text")
    'text: hi'
    >>> print(format_node(n))
    Node: node
      resource-id: a
      text: hi
    <BLANKLINE>

    Args:
        node (Element): 节点
        print_only (str | None): 只输出的属性名

    Returns:
        str: 输出文本，不含末尾换行
    """
    logger.debug(f"Processing node: {node.tag}")

    if print_only:
        if (value := node.get(print_only)) is not None:
            return f"{print_only}: {value}"
        return f"Attribute '{print_only}' not found on node {node.tag}"

    lines = [f"Node: {node.tag}"]
    if len(node.attrib) == 0:
        lines.append(f"  No attributes found for node: {node.tag}")
    for name, value in node.attrib.items():
        lines.append(f"  {name}: {value}")
    lines.append("")
    return "\n".join(lines)
