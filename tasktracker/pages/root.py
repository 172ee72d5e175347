"""Root landing page with a short API overview."""

_ENDPOINTS = (
    ("POST", "/api/tasks", "Create a task"),
    ("GET", "/api/tasks", "List tasks (status, search, dueDateFrom, dueDateTo, page, size)"),
    ("GET", "/api/tasks/{id}", "Get a task"),
    ("PUT", "/api/tasks/{id}", "Replace a task"),
    ("PATCH", "/api/tasks/{id}/status", "Change task status"),
    ("DELETE", "/api/tasks/{id}", "Delete a task"),
)


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    rows = "\n".join(
        f"            <tr><td><code>{method}</code></td><td><code>{path}</code></td><td>{summary}</td></tr>"
        for method, path, summary in _ENDPOINTS
    )
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{app_name}</title>
    <style>
        body {{ font-family: system-ui, sans-serif; max-width: 720px; margin: 2rem auto; padding: 0 1rem; }}
        table {{ border-collapse: collapse; width: 100%; }}
        td {{ padding: 0.35rem 0.5rem; border-bottom: 1px solid #ddd; }}
    </style>
</head>
<body>
    <h1>Welcome to the Task Management API</h1>
    <p>Interactive documentation: <a href="/docs">Swagger UI</a> &middot; <a href="/redoc">ReDoc</a></p>
    <table>
{rows}
    </table>
</body>
</html>
"""
