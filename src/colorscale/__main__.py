from colorscale.cli import main

raise SystemExit(main())
