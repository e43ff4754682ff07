"""布局文件的加载"""
import logging
from os import PathLike
from xml.etree.ElementTree import Element, ParseError, parse

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """布局文件无法读取或无法解析"""

    def __init__(self, path: str | PathLike[str]) -> None:
        super().__init__(f"could not parse file {path}")
        self.path = path


def load_document(path: str | PathLike[str]) -> Element | None:
    """读取并解析布局文件，返回根节点

    Args:
        path (str | PathLike[str]): 布局文件路径

    Returns:
        Element | None: 根节点

    Raises:
        DocumentError: 文件不存在、无法读取或不是合法的 XML
    """
    logger.debug(f"Opening XML file: {path}")
    try:
        tree = parse(path)
    except (OSError, ParseError) as e:
        raise DocumentError(path) from e
    logger.debug("Successfully loaded XML file")
    return tree.getroot()
