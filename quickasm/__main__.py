""" Main entry point """

from quickasm.cli.asm import main


if __name__ == "__main__":
    main()
