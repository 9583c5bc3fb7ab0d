from dinorun.main import main

main()
