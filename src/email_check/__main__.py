from email_check.cli import main

raise SystemExit(main())
