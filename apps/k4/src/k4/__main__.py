from k4.cli import main

raise SystemExit(main())
