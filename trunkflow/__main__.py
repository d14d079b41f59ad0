from trunkflow.cli.app import main

main()
