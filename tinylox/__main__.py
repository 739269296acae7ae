from tinylox.lox import main

if __name__ == "__main__":
    main()
