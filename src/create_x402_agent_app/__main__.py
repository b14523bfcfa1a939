from create_x402_agent_app import main

main()
