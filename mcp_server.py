from dataclasses import asdict
from typing import Any, Dict, Optional
import os
from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mentionmarkup import MarkupEditor
from mentionmarkup.logging import configure_logging, get_logger

# Load environment variables
load_dotenv()

# Initialize FastMCP server
mcp = FastMCP("mentions")

logger = get_logger("mcp_server")

# Editor bound to the configured default template
editor: Optional[MarkupEditor] = None


def initialize_editor() -> None:
    """
    Initialize the default editor with the template from environment variables.
    This is called once at server startup.
    """
    global editor

    try:
        editor = MarkupEditor()
        logger.info("Mention editor initialized with markup %s", editor.markup)
    except Exception as e:
        logger.error("Error initializing mention editor: %s", e)


def _get_editor(markup: Optional[str]) -> MarkupEditor:
    if markup:
        return MarkupEditor(markup=markup)
    if editor is None:
        raise RuntimeError(
            "Mention editor not initialized. Check MENTIONS_MARKUP environment variable."
        )
    return editor


@mcp.tool()
async def get_plain_text(value: str, markup: Optional[str] = None) -> Dict[str, Any]:
    """
    Render a marked up value as the plain text a user sees.

    Args:
        value: The marked up value
        markup: Optional markup template, defaults to the configured one

    Returns:
        Dict containing the plain text
    """
    try:
        plain_text = _get_editor(markup).plain_text(value)
        return {"success": True, "plain_text": plain_text}
    except Exception as e:
        return {
            "success": False,
            "error": str(e),
            "message": "Failed to render plain text",
        }


@mcp.tool()
async def get_mentions(value: str, markup: Optional[str] = None) -> Dict[str, Any]:
    """
    List the mentions contained in a marked up value.

    Args:
        value: The marked up value
        markup: Optional markup template, defaults to the configured one

    Returns:
        Dict containing the mentions with their source and plain text offsets
    """
    try:
        mentions = [asdict(mention) for mention in _get_editor(markup).mentions(value)]
        return {
            "success": True,
            "mentions": mentions,
            "count": len(mentions),
            "message": f"Found {len(mentions)} mentions",
        }
    except Exception as e:
        return {"success": False, "error": str(e), "message": "Failed to get mentions"}


@mcp.tool()
async def map_plain_text_index(
    value: str,
    index: int,
    in_markup_correction: str = "START",
    markup: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Map an offset in the plain text to the offset in the marked up value.

    Args:
        value: The marked up value
        index: Offset in the plain text
        in_markup_correction: One of START, END, NULL for offsets inside a mention
        markup: Optional markup template, defaults to the configured one

    Returns:
        Dict containing the mapped offset (None when inside a mention with NULL)
    """
    try:
        mapped = _get_editor(markup).map_index(value, index, in_markup_correction)
        return {"success": True, "index": mapped}
    except Exception as e:
        return {"success": False, "error": str(e), "message": "Failed to map index"}


@mcp.tool()
async def apply_change(
    value: str,
    plain_text_value: str,
    selection_end_after_change: int,
    selection_start_before_change: Optional[int] = None,
    selection_end_before_change: Optional[int] = None,
    markup: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Apply an edit made to the plain text to the marked up value.

    Args:
        value: The marked up value before the edit
        plain_text_value: The plain text after the edit
        selection_end_after_change: Caret position in the new plain text
        selection_start_before_change: Selection start before the edit, if known
        selection_end_before_change: Selection end before the edit, if known
        markup: Optional markup template, defaults to the configured one

    Returns:
        Dict containing the new marked up value and its plain text
    """
    try:
        current = _get_editor(markup)
        new_value = current.apply_change(
            value,
            plain_text_value,
            selection_start_before_change,
            selection_end_before_change,
            selection_end_after_change,
        )
        return {
            "success": True,
            "value": new_value,
            "plain_text": current.plain_text(new_value),
        }
    except Exception as e:
        return {
            "success": False,
            "error": str(e),
            "message": "Failed to apply change",
        }


@mcp.tool()
async def make_mention_markup(
    id: str, display: str, type: Optional[str] = None, markup: Optional[str] = None
) -> Dict[str, Any]:
    """
    Serialize a mention into markup, ready to be inserted into a value.

    Args:
        id: The mentioned entity's ID
        display: The text shown for the mention
        type: Optional mention type for templates with a __type__ placeholder
        markup: Optional markup template, defaults to the configured one

    Returns:
        Dict containing the mention markup
    """
    try:
        mention_markup = _get_editor(markup).make_markup(id, display, type)
        return {"success": True, "markup": mention_markup}
    except Exception as e:
        return {
            "success": False,
            "error": str(e),
            "message": "Failed to create mention markup",
        }


if __name__ == "__main__":
    configure_logging(
        verbose=os.getenv("MENTIONS_DEBUG", "").lower() in ("1", "true", "yes")
    )

    # Initialize the default editor
    initialize_editor()

    # Initialize and run the server
    logger.info("Starting mentions MCP server...")
    mcp.run(transport="stdio")
