from nodes_core.cli.main import main

main()
