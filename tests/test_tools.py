"""Tool layer tests: registry dispatch and response envelope."""

from record_search import tools
from record_search.config import reset_config
from record_search.tool_registry import execute_tool, get_tool_registry


def seed():
    execute_tool("add_record", key="S001", label="Alice Johnson", score=3.85)
    execute_tool("add_record", key="S003", label="Alice Williams", score=3.67)
    execute_tool("add_record", key="S002", label="Bob Smith", score=3.92)


class TestRegistry:
    def test_registered_tools(self):
        assert set(get_tool_registry()) == {
            "add_record",
            "search_by_id",
            "search_by_name",
            "search_by_exact_name",
            "list_records",
            "get_store_stats",
            "reset_store",
        }

    def test_unknown_tool(self):
        result = execute_tool("drop_everything")
        assert result == {"success": False, "error": "Unknown tool: drop_everything"}

    def test_unexpected_argument(self):
        result = execute_tool("search_by_id", identifier="S001")
        assert result["success"] is False
        assert "identifier" in result["error"]


class TestRecordTools:
    def test_add_and_lookup(self):
        result = execute_tool("add_record", key="S001", label="Alice Johnson", score=3.85)
        assert result == {"key": "S001", "size": 1, "success": True}

        found = execute_tool("search_by_id", key="S001")
        assert found["success"] is True
        assert found["found"] is True
        assert found["record"] == {"key": "S001", "label": "Alice Johnson", "score": 3.85}

    def test_lookup_miss_is_not_an_error(self):
        result = execute_tool("search_by_id", key="S999")
        assert result == {"found": False, "record": None, "success": True}

    def test_name_search(self):
        seed()
        result = execute_tool("search_by_name", prefix="ali")
        assert result["success"] is True
        assert result["count"] == 2
        assert [r["key"] for r in result["records"]] == ["S001", "S003"]

    def test_blank_name_search(self):
        seed()
        assert execute_tool("search_by_name", prefix="  ")["count"] == 0

    def test_exact_name_search(self):
        seed()
        result = execute_tool("search_by_exact_name", name="BOB SMITH")
        assert [r["key"] for r in result["records"]] == ["S002"]

    def test_score_is_coerced(self):
        execute_tool("add_record", key="S001", label="Alice", score="3.5")
        assert execute_tool("search_by_id", key="S001")["record"]["score"] == 3.5

    def test_invalid_score(self):
        result = execute_tool("add_record", key="S001", label="Alice", score="n/a")
        assert result["success"] is False
        assert result["error"].startswith("Invalid value")
        assert result["function"] == "tool_add_record"
        assert execute_tool("list_records")["count"] == 0

    def test_non_string_key(self):
        result = execute_tool("add_record", key=17, label="Alice", score=1.0)
        assert result["success"] is False

    def test_list_and_reset(self):
        seed()
        assert execute_tool("list_records")["count"] == 3

        assert execute_tool("reset_store") == {"size": 0, "success": True}
        assert execute_tool("list_records") == {"records": [], "count": 0, "success": True}

    def test_stats(self):
        seed()
        stats = execute_tool("get_store_stats")
        assert stats["success"] is True
        assert stats["record_count"] == 3
        assert stats["key_index"]["capacity"] == 100
        assert stats["name_trie"]["records_indexed"] == 3
        assert stats["process_rss_mb"] > 0


class TestGlobalStore:
    def test_get_store_is_shared(self):
        assert tools.get_store() is tools.get_store()

    def test_reset_picks_up_config(self, monkeypatch):
        monkeypatch.setenv("RECORD_SEARCH_INITIAL_CAPACITY", "8")
        reset_config()
        store = tools.reset_store()
        assert store.key_index.capacity == 8
        assert execute_tool("get_store_stats")["key_index"]["capacity"] == 8


class TestMcpServer:
    """Server tool functions delegate to the registry"""

    def test_server_tools_round_trip(self):
        from record_search import mcp_server

        assert mcp_server.add_record("S009", "Grace Lee", 3.88)["size"] == 1
        assert mcp_server.search_by_id("S009")["record"]["label"] == "Grace Lee"
        assert mcp_server.search_by_name("gra")["count"] == 1
        assert mcp_server.search_by_exact_name("grace lee")["count"] == 1
        assert mcp_server.list_records()["count"] == 1
        assert mcp_server.get_store_stats()["record_count"] == 1
        assert mcp_server.reset_store()["size"] == 0

    def test_config_resource(self):
        from record_search import mcp_server

        text = mcp_server.get_config()
        assert "StoreConfig(initial_capacity=100" in text
        assert "RECORD_SEARCH_LOAD_FACTOR" in text
