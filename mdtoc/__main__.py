from mdtoc.cli import main

main()
