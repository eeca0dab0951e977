from hn_comments.main import main

if __name__ == "__main__":
    main()
