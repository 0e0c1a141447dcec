from npmrel.cli.app import main

main()
