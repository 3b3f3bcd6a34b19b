from ok.cli import main

main()
