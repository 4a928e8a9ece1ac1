"""Entry point for `python -m ccline`."""


def main():
    from ccline.app import main as cli
    cli()


if __name__ == "__main__":
    main()
