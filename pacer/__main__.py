# pacer/__main__.py
# Allow `python -m pacer`

from .cli.app import main

if __name__ == "__main__":
    main()
