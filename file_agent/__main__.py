from file_agent.cli import main

raise SystemExit(main())
