#!/usr/bin/env python
"""
Development convenience script to run record-search from a checkout.
"""
import os
import sys
import traceback

# Add src directory to path
src_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

def _explain_missing_dependency(error: ModuleNotFoundError) -> None:
    missing = getattr(error, "name", None) or str(error)
    sys.stderr.write(
        "Missing required dependency: {name}\n"
        "Install project requirements first (`pip install -e .[test]`).\n".format(name=missing)
    )

def main() -> None:
    try:
        from record_search.__main__ import main as cli_main
    except ModuleNotFoundError as exc:
        _explain_missing_dependency(exc)
        raise SystemExit(1) from exc
    except Exception:
        traceback.print_exc()
        raise SystemExit(1)
    else:
        raise SystemExit(cli_main(sys.argv[1:] or ["demo"]))


if __name__ == "__main__":
    main()
