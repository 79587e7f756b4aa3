from fns.cli import main

main()
