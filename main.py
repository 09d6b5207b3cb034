from pixel_hopper.game import main


if __name__ == "__main__":
    main()
