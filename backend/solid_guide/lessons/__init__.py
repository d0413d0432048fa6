# Markdown lessons shipped as package data, one file per principle
