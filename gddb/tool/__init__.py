"""Command line tool for inspecting and editing a gddb database file."""
