from .terminal_client import main

raise SystemExit(main())
