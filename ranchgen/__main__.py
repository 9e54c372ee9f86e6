from ranchgen.cli import main

main()
