from src.ens_search.cli import main

# python -m src.ens_search
if __name__ == "__main__":
    raise SystemExit(main())
