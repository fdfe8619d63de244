"""Build a downloadable React/Vite project from portfolio data.

Every portfolio gets the same project skeleton; the template id is only
mentioned in the generated README.
"""
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional
import io
import json
import logging
import re
import uuid
import zipfile

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from app.core.config import settings
from app.core.exceptions import TemplateProcessingError
from app.schemas.portfolio import PortfolioData

logger = logging.getLogger(__name__)

PROJECT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "portfolio"

# Stored without the leading dot
RENAMED_FILES = {"gitignore": ".gitignore"}

RUNTIME_DEPENDENCIES = {
    "react": "^18.3.1",
    "react-dom": "^18.3.1",
    "react-router-dom": "^6.22.0",
    "framer-motion": "^11.13.1",
    "@emailjs/browser": "^4.4.1",
    "lucide-react": "^0.344.0",
}

DEV_DEPENDENCIES = {
    "@vitejs/plugin-react": "^4.7.0",
    "vite": "^5.4.20",
    "typescript": "^5.6.3",
    "tailwindcss": "^3.4.17",
    "postcss": "^8.4.47",
    "autoprefixer": "^10.4.20",
}


def html_attr(value) -> Markup:
    """Escape for double-quoted attributes and element text, leaving apostrophes as typed."""
    text = str(value)
    for char, entity in (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ('"', "&quot;")):
        text = text.replace(char, entity)
    return Markup(text)


def _get_env() -> Environment:
    # Square-bracket delimiters; JSX uses {{ }}
    env = Environment(
        loader=FileSystemLoader(str(PROJECT_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
        block_start_string="[%",
        block_end_string="%]",
        variable_start_string="[[",
        variable_end_string="]]",
        comment_start_string="[#",
        comment_end_string="#]",
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["html_attr"] = html_attr
    return env


def package_name(name: str) -> str:
    slug = re.sub(r"[^a-z0-9._-]+", "-", name.strip().lower()).strip("-.")
    return f"{slug or 'my'}-portfolio"


def _package_json(portfolio: PortfolioData) -> str:
    personal = portfolio.personal
    manifest = {
        "name": package_name(personal.name),
        "version": "1.0.0",
        "private": True,
        "type": "module",
        "description": f"Portfolio website of {personal.name}",
        "author": f"{personal.name} <{personal.email}>",
        "license": "MIT",
        "scripts": {
            "dev": "vite",
            "build": "vite build",
            "preview": "vite preview",
        },
        "dependencies": RUNTIME_DEPENDENCIES,
        "devDependencies": DEV_DEPENDENCIES,
    }
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"


def generate_portfolio_structure(portfolio: PortfolioData, template_id: str) -> Dict[str, str]:
    """Render the full project as a mapping of relative path to file content."""
    env = _get_env()
    context = {
        "personal": portfolio.personal,
        "social": portfolio.social,
        "template_id": template_id,
        "year": datetime.now().year,
        "portfolio_json": json.dumps(portfolio.model_dump(), indent=2, ensure_ascii=False),
    }

    files: Dict[str, str] = {"package.json": _package_json(portfolio)}
    for name in env.list_templates():
        target = RENAMED_FILES.get(name, name)
        files[target] = env.get_template(name).render(context)
    return files


def create_portfolio_zip(portfolio: PortfolioData, template_id: str, output_path) -> str:
    """Write the generated project to a new zip at ``output_path`` and return the path."""
    try:
        files = generate_portfolio_structure(portfolio, template_id)
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for path, content in sorted(files.items()):
                zf.writestr(path, content)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(buffer.getvalue())
    except Exception as e:
        logger.error("Building portfolio archive failed: %s", e)
        raise TemplateProcessingError(f"Failed to create portfolio zip: {str(e)}") from e

    logger.info("Wrote portfolio archive with %d files to %s", len(files), output_path)
    return str(output_path)


def create_portfolio_download(
    portfolio: PortfolioData,
    template_id: str,
    downloads_dir: Optional[Path] = None,
) -> Path:
    """Build the archive under a unique name in the downloads directory."""
    out_dir = Path(downloads_dir or settings.DOWNLOADS_DIR)
    filename = f"{package_name(portfolio.personal.name)}-{uuid.uuid4().hex[:8]}.zip"
    return Path(create_portfolio_zip(portfolio, template_id, out_dir / filename))
