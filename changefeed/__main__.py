from changefeed.cli.app import main

main()
