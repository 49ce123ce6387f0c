from minibank.console import main

raise SystemExit(main())
