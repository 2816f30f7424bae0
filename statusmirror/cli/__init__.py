"""
CLI Commands — Subcommands registered on the statusmirror group.
"""
