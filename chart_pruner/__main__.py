from chart_pruner.main import main

if __name__ == "__main__":
    raise SystemExit(main())
