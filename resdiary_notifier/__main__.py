from resdiary_notifier.cli import main

main()
