from chksum.cli import main

main()
