from phongtrace.main import main

raise SystemExit(main())
