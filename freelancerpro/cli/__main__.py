from freelancerpro.cli import main

main()
