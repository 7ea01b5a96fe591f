"""Entry point: contents | tags."""

import sys


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m search_nico.main [contents|tags] <keyword...>")
        sys.exit(2)

    mode = sys.argv[1].lower()
    if mode in ("contents", "tags"):
        from search_nico.interfaces.oneshot import main as run_oneshot_main

        query_parts = sys.argv[2:]
        if query_parts:
            query = " ".join(query_parts).strip()
        else:
            query = sys.stdin.read().strip()
        sys.exit(run_oneshot_main(mode=mode, query=query))

    else:
        print(f"Unknown mode: {mode}")
        print("Usage: python -m search_nico.main [contents|tags] <keyword...>")
        sys.exit(2)


if __name__ == "__main__":
    main()
