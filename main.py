from webterm.cli_terminal import main

if __name__ == "__main__":
    raise SystemExit(main())
