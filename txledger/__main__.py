from txledger.cli import main

raise SystemExit(main())
