from roadgraph.cli.main import main

raise SystemExit(main())
