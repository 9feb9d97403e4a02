from winres.cli import main

main()
