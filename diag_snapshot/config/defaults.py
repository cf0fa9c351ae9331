"""Configuration de commandes intégrée, utilisée sans fichier -c."""

DEFAULT_COMMAND_CONFIG = """\
id
date
top -bn1
ps auxfww
vmstat 1 10
iostat 1 10
free -m
df -h
#if which apachectl
links -dump http://127.0.0.1/server-status
"""
