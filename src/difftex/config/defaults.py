"""Starter .difftex.toml template."""

CONFIG_FILENAME = ".difftex.toml"

DEFAULT_TOML = """\
# difftex configuration
[git]
ref = "HEAD"              # reference to diff against / start the log from
unified = 3               # context lines around each hunk
max_count = 0             # log only: number of commits, 0 = unlimited
timeout = 60              # seconds before the git command is abandoned

[output]
path = ""                 # empty = git-diff.tex / git-log.tex

[document]
title = ""                # empty = "Git Diff Output" / "Git Log Output"
author = "Generated from Git Repository"
commit_id_width = 8       # commit ids in headings are truncated to this width
"""
