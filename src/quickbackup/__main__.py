from quickbackup.cli import main

raise SystemExit(main())
