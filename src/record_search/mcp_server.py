"""Record Search MCP server."""

import logging
import sys
from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from .config import CONFIG_DOCS, get_store_config
from .tool_registry import execute_tool

mcp = FastMCP("RecordSearch")


@mcp.resource("config://record-search")
def get_config() -> str:
    return f"{get_store_config()!r}\n{CONFIG_DOCS}"


@mcp.tool()
def add_record(key: str, label: str, score: float) -> Dict[str, Any]:
    """Index a record by id and by name. Re-using a key overwrites the id entry."""
    return execute_tool("add_record", key=key, label=label, score=score)


@mcp.tool()
def search_by_id(key: str) -> Dict[str, Any]:
    """Exact id lookup."""
    return execute_tool("search_by_id", key=key)


@mcp.tool()
def search_by_name(prefix: str) -> Dict[str, Any]:
    """Case-insensitive name prefix lookup; only letters are compared."""
    return execute_tool("search_by_name", prefix=prefix)


@mcp.tool()
def search_by_exact_name(name: str) -> Dict[str, Any]:
    """Records whose letters-only lowercase name equals the given name."""
    return execute_tool("search_by_exact_name", name=name)


@mcp.tool()
def list_records() -> Dict[str, Any]:
    """Every stored record, in hash bucket order."""
    return execute_tool("list_records")


@mcp.tool()
def get_store_stats() -> Dict[str, Any]:
    """Index sizes, load factor, trie shape and process memory."""
    return execute_tool("get_store_stats")


@mcp.tool()
def reset_store() -> Dict[str, Any]:
    """Drop every record and start from an empty store."""
    return execute_tool("reset_store")


def main(log_level: int = logging.ERROR):
    # stdout carries the MCP stream; logs go to stderr
    logging.basicConfig(level=log_level, stream=sys.stderr)
    mcp.run()


if __name__ == "__main__":
    main()
