from aoc2022.cli import main

raise SystemExit(main())
