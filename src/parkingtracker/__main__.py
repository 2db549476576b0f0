from parkingtracker.cli import main

raise SystemExit(main())
