"""Entry point: python -m wealthsim"""

from wealthsim.app import main


if __name__ == "__main__":
    main()
