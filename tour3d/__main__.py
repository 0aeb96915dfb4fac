from tour3d.cli import main

raise SystemExit(main())
