"""Run the gddb command line tool with `python -m gddb`."""

from gddb.tool.gddb import main

if __name__ == "__main__":
    main()
