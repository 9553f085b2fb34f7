"""Integration instructions printed by ``docsmd --instruction``."""

INSTRUCTIONS = """\
docsmd - read Google Docs as Markdown
=====================================

Use docsmd when a task references a Google Docs URL
(https://docs.google.com/document/d/...). It prints the document as Markdown
with YAML frontmatter on stdout.

Setup (once, done by a human):
  1. Create an OAuth 2.0 client for a Desktop application in the Google Cloud
     console and download its JSON file.
  2. Save it as ~/.config/docsmd/config.json (or pass --config PATH).
  3. Run `docsmd --init` and approve access in the browser.

Usage:
  docsmd --clean --url "https://docs.google.com/document/d/DOC_ID/edit"

  --clean      Only print Markdown (no log lines). Always use it when piping.
  --comments   Append the document's comment threads in a "## Comments" section.

Tabs:
  A URL containing ?tab=t.xxx renders that tab; otherwise the first tab is
  rendered. The frontmatter then contains a `tab:` entry with the tab title.

Output format:
  ---
  title: <document title>
  tab: <tab title, when different from the title>
  ---

  <markdown body>

Errors are printed to stderr as "Error: ..." with exit code 1. If the token is
missing or expired and cannot be refreshed, ask the user to run
`docsmd --init`.
"""
