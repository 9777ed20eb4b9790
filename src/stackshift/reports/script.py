"""Reviewable shell script applying automatable breaking changes."""

from jinja2 import Template

from stackshift.models.migration import BreakingChange

NO_CHANGES = "# No automatable changes found\n"

SCRIPT = Template(
    """\
#!/bin/bash
# Auto-generated migration script
# WARNING: Review changes before applying

set -e

echo "Starting automated migration..."
echo "This script will apply {{ changes | length }} automated changes"
echo ""

echo "Have you backed up your code? (y/n)"
read -r response
if [[ "$response" != "y" ]]; then
  echo "Please backup your code before proceeding."
  exit 1
fi

# File extensions to process
EXTENSIONS="js jsx ts tsx vue py rb java"
{% for change in changes %}

# {{ change.description }}
echo 'Applying: {{ change.id }}'
{%- if change.pattern is not none %}
for ext in $EXTENSIONS; do
  find . -name "*.$ext" -type f -not -path "*/node_modules/*" -not -path "*/.git/*" | while read -r file; do
    if grep -qE '{{ change.pattern }}' "$file"; then
      echo "  Updating: $file"
      sed -E -i.bak 's/{{ change.sed_pattern }}/{{ change.sed_replacement }}/g' "$file"
      rm "$file.bak"
    fi
  done
done
{%- else %}
echo "  No automated script available for this change"
{%- endif %}
{%- endfor %}

echo ""
echo "Automated migration complete!"
echo "Please review all changes and run your test suite."
echo ""
echo "Next steps:"
echo "1. Review git diff"
echo "2. Run your linter"
echo "3. Run your test suite"
echo "4. Commit changes"
""",
    keep_trailing_newline=True,
)


def _single_quoted(text: str) -> str:
    """Make text safe inside a single-quoted shell word."""
    return text.replace("'", "'\\''")


def sed_pattern(pattern: str) -> str:
    """Escape the s/// delimiter in an extended regex."""
    return _single_quoted(pattern.replace("/", "\\/"))


def sed_replacement(replacement: str) -> str:
    """Escape the delimiter and '&' in a replacement, keeping \\N backreferences."""
    return _single_quoted(replacement.replace("/", "\\/").replace("&", "\\&"))


def render_migration_script(changes: list[BreakingChange]) -> str:
    """Render a bash script applying every automatable change with sed.

    Automatable changes without both a search pattern and a replacement are
    listed but left for manual migration.
    """
    automatable = [c for c in changes if c.automatable]
    if not automatable:
        return NO_CHANGES

    steps = []
    for change in automatable:
        scripted = change.search_pattern is not None and change.replacement is not None
        steps.append(
            {
                "id": _single_quoted(change.id),
                "description": " ".join(change.description.split()),
                "pattern": _single_quoted(change.search_pattern) if scripted else None,
                "sed_pattern": sed_pattern(change.search_pattern) if scripted else None,
                "sed_replacement": sed_replacement(change.replacement) if scripted else None,
            }
        )
    return SCRIPT.render(changes=steps)
