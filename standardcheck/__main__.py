from standardcheck.scripts.check import main

raise SystemExit(main())
