from lineslice.cli import main

main()
