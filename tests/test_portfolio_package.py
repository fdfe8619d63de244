"""
Tests for portfolio project generation and packaging
"""
import json
import zipfile
from unittest.mock import patch

import pytest

from app.core.exceptions import TemplateProcessingError
from app.services.portfolio_package import (
    create_portfolio_download,
    create_portfolio_zip,
    generate_portfolio_structure,
    html_attr,
    package_name,
)

REQUIRED_FILES = ["package.json", "index.html", "src/main.tsx", "src/App.tsx", "README.md"]


def test_required_files_carry_name_and_email(portfolio):
    """Owner name and email appear verbatim in the key project files"""
    files = generate_portfolio_structure(portfolio, "modern-minimal")

    for path in REQUIRED_FILES:
        assert path in files, path
        assert "Priya Sharma" in files[path], path
        assert "priya.sharma@example.com" in files[path], path


def test_full_project_skeleton_is_generated(portfolio):
    files = generate_portfolio_structure(portfolio, "modern-minimal")

    for path in [
        "vite.config.ts",
        "tailwind.config.js",
        "postcss.config.js",
        "tsconfig.json",
        "src/styles/index.css",
        "src/data/portfolio.ts",
        "src/config/emailjs.ts",
        "src/pages/HomePage.tsx",
        "src/pages/ProjectsPage.tsx",
        "src/pages/AboutPage.tsx",
        "src/pages/ContactPage.tsx",
        "src/components/layout/Layout.tsx",
        "src/components/layout/Header.tsx",
        "src/components/layout/Footer.tsx",
        "src/components/sections/Hero.tsx",
        "src/components/sections/FeaturedProjects.tsx",
        "src/components/sections/Skills.tsx",
        "src/components/cards/ProjectCard.tsx",
        "src/components/forms/ContactForm.tsx",
        "src/utils/animations.ts",
        "src/utils/constants.ts",
        "public/vite.svg",
        ".gitignore",
        "LICENSE",
    ]:
        assert path in files, path
    assert "gitignore" not in files


def test_template_id_only_changes_readme(portfolio):
    first = generate_portfolio_structure(portfolio, "modern-minimal")
    second = generate_portfolio_structure(portfolio, "creative-dark")

    changed = sorted(path for path in first if first[path] != second[path])
    assert changed == ["README.md"]
    assert "creative-dark" in second["README.md"]


def test_package_json_is_valid(portfolio):
    files = generate_portfolio_structure(portfolio, "modern-minimal")
    manifest = json.loads(files["package.json"])

    assert manifest["name"] == "priya-sharma-portfolio"
    assert manifest["author"] == "Priya Sharma <priya.sharma@example.com>"
    assert "@emailjs/browser" in manifest["dependencies"]
    assert manifest["scripts"]["build"] == "vite build"
    json.loads(files["tsconfig.json"])


def test_data_module_embeds_portfolio_json(portfolio):
    files = generate_portfolio_structure(portfolio, "modern-minimal")
    source = files["src/data/portfolio.ts"]

    prefix = "export const portfolioData = "
    assert source.startswith(prefix)
    data = json.loads(source[len(prefix):].rstrip().rstrip(";"))
    assert data["personal"]["name"] == "Priya Sharma"
    assert data["projects"][0]["title"] == "Job Tracker"


def test_jsx_braces_survive_rendering(portfolio):
    files = generate_portfolio_structure(portfolio, "modern-minimal")

    assert "initial={{ opacity: 0 }}" in files["src/pages/HomePage.tsx"]
    assert "emailjs.send(" in files["src/components/forms/ContactForm.tsx"]


def test_html_special_characters_are_escaped_in_index_html(portfolio):
    portfolio.personal.bio = 'Builds <fast> & "accessible" apps'
    files = generate_portfolio_structure(portfolio, "modern-minimal")

    assert "<fast>" not in files["index.html"]
    assert "&lt;fast&gt;" in files["index.html"]
    assert '"accessible"' not in files["index.html"]
    assert "&amp; &quot;accessible&quot;" in files["index.html"]


def test_apostrophes_survive_in_index_html(portfolio):
    portfolio.personal.name = "Anaya D'Souza"
    portfolio.personal.bio = None
    files = generate_portfolio_structure(portfolio, "modern-minimal")

    for path in REQUIRED_FILES:
        assert "Anaya D'Souza" in files[path], path
    assert "<title>Anaya D'Souza - Portfolio</title>" in files["index.html"]
    assert "&#39;" not in files["index.html"]


def test_html_attr_escapes_markup_but_not_apostrophes():
    assert html_attr('O\'Neil <b> & "co"') == "O'Neil &lt;b&gt; &amp; &quot;co&quot;"


@pytest.mark.parametrize("name, expected", [
    ("Priya Sharma", "priya-sharma-portfolio"),
    ("  José  O'Neil ", "jos-o-neil-portfolio"),
    ("!!!", "my-portfolio"),
])
def test_package_name(name, expected):
    assert package_name(name) == expected


def test_zip_contains_every_generated_file(portfolio, tmp_path):
    output = tmp_path / "out" / "portfolio.zip"

    result = create_portfolio_zip(portfolio, "modern-minimal", output)

    assert result == str(output)
    expected = generate_portfolio_structure(portfolio, "modern-minimal")
    with zipfile.ZipFile(output) as zf:
        assert sorted(zf.namelist()) == sorted(expected)
        assert all(info.compress_type == zipfile.ZIP_DEFLATED for info in zf.infolist())
        assert "Priya Sharma" in zf.read("README.md").decode("utf-8")


def test_download_files_get_unique_names(portfolio, tmp_path):
    first = create_portfolio_download(portfolio, "modern-minimal", tmp_path)
    second = create_portfolio_download(portfolio, "modern-minimal", tmp_path)

    assert first != second
    assert first.parent == tmp_path
    assert first.name.startswith("priya-sharma-portfolio-")
    assert first.exists() and second.exists()


def test_zip_write_failure_is_wrapped(portfolio, tmp_path):
    with patch("app.services.portfolio_package.Path.write_bytes", side_effect=OSError("read-only file system")):
        with pytest.raises(TemplateProcessingError, match="Failed to create portfolio zip: read-only file system"):
            create_portfolio_zip(portfolio, "modern-minimal", tmp_path / "p.zip")
