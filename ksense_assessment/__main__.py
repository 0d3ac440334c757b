from ksense_assessment.main import main

if __name__ == "__main__":
    raise SystemExit(main())
