import sys

from config import GITHUB_USERNAME, get_output_dir
from loader import ProjectsLoader
from page import render_page, write_page


def main():
    print("=== Portfolio Page Builder ===")
    print(f"Fetching repositories for {GITHUB_USERNAME}...")

    loader = ProjectsLoader()
    worker = loader.start()
    worker.join()

    state = loader.state
    selection = loader.selection
    path = write_page(render_page(state, selection), get_output_dir())

    if state.error:
        print(f"Failed to fetch repositories: {state.error}")
        print(f"Page written to {path} (projects section shows the error).")
        return 1

    print(f"Featured: {len(selection.featured)} | Top: {len(selection.top)} | Fetched: {len(state.repos)}")
    print(f"Page written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
