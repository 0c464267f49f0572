from object_service.main import main

main()
