"""
Tool Registry - name to tool function mapping

Single dispatch entry point for the server and the CLI.
"""

from typing import Any, Callable, Dict


def _import_tools():
    """Deferred import to avoid a cycle with tools"""
    from .tools import (
        tool_add_record,
        tool_get_store_stats,
        tool_list_records,
        tool_reset_store,
        tool_search_by_exact_name,
        tool_search_by_id,
        tool_search_by_name,
    )

    return {
        "add_record": tool_add_record,
        "search_by_id": tool_search_by_id,
        "search_by_name": tool_search_by_name,
        "search_by_exact_name": tool_search_by_exact_name,
        "list_records": tool_list_records,
        "get_store_stats": tool_get_store_stats,
        "reset_store": tool_reset_store,
    }


def get_tool_registry() -> Dict[str, Callable]:
    return _import_tools()


def execute_tool(tool_name: str, **kwargs) -> Dict[str, Any]:
    """
    Run a registered tool by name.

    Unknown names and bad arguments come back as error responses.
    """
    tools = get_tool_registry()
    tool_func = tools.get(tool_name)

    if not tool_func:
        return {"success": False, "error": f"Unknown tool: {tool_name}"}

    try:
        return tool_func(**kwargs)
    except TypeError as e:
        return {"success": False, "error": f"Tool execution failed: {e}"}
