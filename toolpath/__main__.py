from toolpath.cli import main

raise SystemExit(main())
