"""
FastMCP Server implementation for the portfolio page.
Exposes tools for listing the showcased repositories and rendering the page.
"""

from fastmcp import FastMCP
from config import GITHUB_USERNAME, logger
from loader import ProjectsLoader
from page import render_page, write_page

INSTRUCTIONS = f"""
You help the owner of a personal portfolio page. The page shows the featured and most-starred
public GitHub repositories of '{GITHUB_USERNAME}'. Use the tools to inspect those repositories
or to regenerate the HTML page.
"""

# Initialize FastMCP Server
mcp = FastMCP("PortfolioPage", instructions=INSTRUCTIONS)


def _format_repo(repo):
    desc = repo.get("description") or "No description"
    return [
        f"{repo['name']} | ★ {repo['stars']}",
        f"   {repo['url']}",
        f"   {desc[:150]}\n",
    ]


# Core implementation functions (testable without FastMCP decorator)
def _list_projects_impl() -> str:
    """Load the repositories once and list the featured and top grids."""
    loader = ProjectsLoader()
    state = loader.load()
    if state.error:
        return f"Error: {state.error}"

    selection = loader.selection
    output = [f"--- Featured projects ({len(selection.featured)}) ---"]
    for repo in selection.featured:
        output.extend(_format_repo(repo))
    output.append(f"--- Top repositories ({len(selection.top)}) ---")
    for repo in selection.top:
        output.extend(_format_repo(repo))
    if not selection.top:
        output.append("No repositories found.")
    return "\n".join(output)


def _render_page_impl(output_dir: str = None) -> str:
    """Load the repositories once and write the rendered page."""
    try:
        loader = ProjectsLoader()
        state = loader.load()
        path = write_page(render_page(state, loader.selection), output_dir)
        if state.error:
            return f"Rendered page to {path} with error: {state.error}"
        return f"Successfully rendered portfolio page to {path}."
    except OSError as e:
        logger.error(f"Error in render_portfolio_page: {str(e)}")
        return f"Error in render_portfolio_page: {str(e)}"


# FastMCP decorated functions (wrappers around implementation)
@mcp.tool(name="list_portfolio_projects")
def list_projects_tool() -> str:
    """
    List the featured repositories and the top repositories by stars shown on the portfolio page.
    """
    return _list_projects_impl()


@mcp.tool(name="render_portfolio_page")
def render_page_tool(output_dir: str = None) -> str:
    """
    Fetch fresh repository data and write the portfolio page as index.html.

    Args:
        output_dir: Optional directory for index.html (defaults to PORTFOLIO_OUTPUT_DIR or ./site).
    """
    return _render_page_impl(output_dir)


def run():
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":
    run()
