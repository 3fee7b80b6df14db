"""Server-rendered admin shell: header, navigation and logout."""

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, RedirectResponse

from portfolio_cms.domain.errors import NotFoundError

ADMIN_TITLE = "MTP Collective Admin"

NAV_ITEMS = (
    ("Dashboard", "/admin/dashboard"),
    ("Photos", "/admin/photos"),
    ("Categories", "/admin/categories"),
    ("Articles", "/admin/articles"),
    ("Users", "/admin/users"),
    ("Settings", "/admin/settings"),
)

# Sections and the API collection each one lists; the dashboard shows photos.
_SECTION_ENDPOINTS = {
    "dashboard": "/api/photos",
    "photos": "/api/photos",
    "categories": "/api/categories",
    "articles": "/api/articles",
    "users": "/api/users",
    "settings": "/api/settings",
}

router = APIRouter(prefix="/admin", tags=["admin"])


def is_active(current_path: str, href: str) -> bool:
    """A nav item is active when its path prefixes the current path."""
    return current_path.startswith(href)


def render_admin_header(current_path: str) -> str:
    """Render the admin header with the active nav item marked."""
    links = []
    for label, href in NAV_ITEMS:
        css_class = ' class="active"' if is_active(current_path, href) else ""
        links.append(f'<li><a href="{href}"{css_class}>{label}</a></li>')
    return (
        '<header class="admin-header">\n'
        f"  <h1>{ADMIN_TITLE}</h1>\n"
        f'  <nav><ul>{"".join(links)}</ul></nav>\n'
        '  <button id="logout" type="button" onclick="logout()">Logout</button>\n'
        "</header>"
    )


@router.get("")
def admin_root() -> RedirectResponse:
    return RedirectResponse(
        url="/admin/dashboard", status_code=status.HTTP_307_TEMPORARY_REDIRECT
    )


@router.get("/login", response_class=HTMLResponse)
def admin_login() -> HTMLResponse:
    """Login form that stores the session client-side."""
    return HTMLResponse(_LOGIN_HTML.replace("{title}", ADMIN_TITLE))


@router.get("/{section}", response_class=HTMLResponse)
def admin_section(section: str) -> HTMLResponse:
    """Admin shell for one section, loading its data from the JSON API."""
    endpoint = _SECTION_ENDPOINTS.get(section)
    if endpoint is None:
        raise NotFoundError("Page not found")
    page = (
        _SHELL_HTML.replace("{title}", ADMIN_TITLE)
        .replace("{header}", render_admin_header(f"/admin/{section}"))
        .replace("{section}", section.capitalize())
        .replace("{endpoint}", endpoint)
    )
    return HTMLResponse(page)


_STYLE = """
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0; }
      .admin-header { display: flex; align-items: center; gap: 2rem;
        padding: 1rem 2rem; border-bottom: 1px solid #ddd; }
      .admin-header ul { display: flex; gap: 1rem; list-style: none;
        margin: 0; padding: 0; }
      .admin-header a.active { font-weight: bold; text-decoration: underline; }
      main { padding: 2rem; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>"""

_LOGOUT_SCRIPT = """
      async function logout() {
        try {
          await fetch('/api/auth/logout', { method: 'POST' });
        } finally {
          localStorage.removeItem('auth_token');
          localStorage.removeItem('user');
          document.cookie =
            'auth_token=; path=/; expires=Thu, 01 Jan 1970 00:00:00 GMT; '
            + 'SameSite=Strict';
          window.location.href = '/admin/login';
        }
      }"""

_SHELL_HTML = (
    """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{title}</title>"""
    + _STYLE
    + """
  </head>
  <body>
    {header}
    <main>
      <h2>{section}</h2>
      <pre id="output">Loading...</pre>
    </main>
    <script>"""
    + _LOGOUT_SCRIPT
    + """
      async function loadSection() {
        const output = document.getElementById('output');
        const token = localStorage.getItem('auth_token');
        if (!token) {
          window.location.href = '/admin/login';
          return;
        }
        const res = await fetch('{endpoint}', {
          headers: { 'Authorization': 'Bearer ' + token }
        });
        if (res.status === 401) {
          window.location.href = '/admin/login';
          return;
        }
        if (!res.ok) {
          output.textContent = 'Error: ' + res.status;
          return;
        }
        const data = await res.json();
        output.textContent = JSON.stringify(data, null, 2);
      }
      loadSection();
    </script>
  </body>
</html>
"""
)

_LOGIN_HTML = (
    """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{title} - Login</title>"""
    + _STYLE
    + """
  </head>
  <body>
    <main>
      <h1>{title}</h1>
      <form id="login-form">
        <p><input id="username" placeholder="Username or email" /></p>
        <p><input id="password" type="password" placeholder="Password" /></p>
        <button type="submit">Sign in</button>
      </form>
      <p id="error"></p>
    </main>
    <script>
      document.getElementById('login-form').addEventListener('submit', async (e) => {
        e.preventDefault();
        const res = await fetch('/api/auth/login', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({
            username: document.getElementById('username').value,
            password: document.getElementById('password').value
          })
        });
        const data = await res.json();
        if (!res.ok) {
          document.getElementById('error').textContent = data.message;
          return;
        }
        localStorage.setItem('auth_token', data.token);
        localStorage.setItem('user', JSON.stringify(data.user));
        window.location.href = '/admin/dashboard';
      });
    </script>
  </body>
</html>
"""
)
