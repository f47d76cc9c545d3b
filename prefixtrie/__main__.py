from prefixtrie.cli import main

raise SystemExit(main())
