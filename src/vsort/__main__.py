from vsort.cli import main

main()
