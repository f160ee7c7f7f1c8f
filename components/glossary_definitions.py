"""Glossary term definitions for the Cyber Glossary Explorer."""

GLOSSARY_TERMS = [
    {
        "id": "phishing",
        "name": "Phishing",
        "category": "threat",
        "preview": "Fraud that imitates legitimate services to steal data.",
        "definition": "Phishing is a kind of fraud in which attackers pose as trusted services and forge emails or websites to trick the victim into handing over logins, passwords or financial data. It usually arrives by email, messenger or through fake web pages.",
        "links": [
            {
                "name": "Cyber Police Department: phishing advice",
                "url": "https://cyberpolice.gov.ua/",
                "description": "Official recommendations and examples of fraudulent emails."
            }
        ],
        "illustration": "phishing"
    },
    {
        "id": "firewall",
        "name": "Firewall",
        "category": "protection",
        "preview": "A system that controls traffic between networks.",
        "definition": "A firewall is a device or piece of software that filters network traffic according to security rules. It helps block unauthorized access and reduces the risk of attacks.",
        "links": [
            {
                "name": "Network security basics",
                "url": "https://example.com/network-security",
                "description": "A short introduction to firewalls and filtering rules."
            }
        ],
        "illustration": "firewall"
    },
    {
        "id": "2fa",
        "name": "Two-factor authentication (2FA)",
        "category": "protection",
        "preview": "An extra layer of protection: password plus one more code.",
        "definition": "2FA is a way of confirming identity where, besides the password, one more factor is required (for example a code from an SMS or an authenticator app). It makes taking over an account much harder.",
        "links": [
            {
                "name": "Google: set up 2-Step Verification",
                "url": "https://support.google.com/",
                "description": "How to turn on 2FA for Google services (example)."
            }
        ],
        "illustration": "two_factor"
    },
    {
        "id": "malware",
        "name": "Malware",
        "category": "threat",
        "preview": "Software written to damage or take control of a device.",
        "definition": "Malware is any program designed to harm a computer, steal information or give an attacker control over the device. Viruses, trojans, spyware and ransomware are all kinds of malware.",
        "links": [],
        "illustration": "malware"
    },
    {
        "id": "ransomware",
        "name": "Ransomware",
        "category": "threat",
        "preview": "Malware that encrypts files and demands payment.",
        "definition": "Ransomware encrypts the victim's files or locks the whole system and then demands a ransom for the decryption key. Regular offline backups are the most reliable way to recover without paying.",
        "links": [
            {
                "name": "No More Ransom",
                "url": "https://www.nomoreransom.org/",
                "description": "Free decryption tools from law enforcement and security companies."
            }
        ],
        "illustration": "malware"
    },
    {
        "id": "password-manager",
        "name": "Password manager",
        "category": "protection",
        "preview": "A vault that generates and stores unique passwords.",
        "definition": "A password manager creates long random passwords for every service and keeps them in an encrypted vault, so you only need to remember one strong master password.",
        "links": [],
        "illustration": "two_factor"
    },
    {
        "id": "vpn",
        "name": "VPN (Virtual Private Network)",
        "category": "networks",
        "preview": "An encrypted tunnel between your device and a remote network.",
        "definition": "A VPN creates an encrypted tunnel between a device and a VPN server, hiding the traffic from the local network and the internet provider. It is especially useful on public Wi-Fi.",
        "links": [],
        "illustration": "network"
    },
    {
        "id": "router",
        "name": "Router",
        "category": "networks",
        "preview": "A device that forwards traffic between networks.",
        "definition": "A router connects a home or office network to the internet and forwards packets between them. Changing its default password and updating its firmware closes many common attack paths.",
        "links": [],
        "illustration": "network"
    }
]
