"""Payment domain: balance transfers between users through a wallet client."""