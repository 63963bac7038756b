from quickenv.cli import main

raise SystemExit(main())
