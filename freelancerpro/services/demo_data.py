"""Demo dataset: one freelancer with a small, consistent business."""

from typing import Optional

from freelancerpro.models import AppData
from freelancerpro.services.passwords import hash_password

DEMO_USER_ID = "demo-user-1"
DEMO_EMAIL = "demo@freelancerpro.com"
DEMO_PASSWORD = "demo123"

_FINTECH_CONTRACT = """SOFTWARE DEVELOPMENT AGREEMENT

PARTIES:
Developer: FreelancerPro Demo
Client: Tech Startup Inc.

SCOPE:
- Native mobile application for iOS and Android
- REST API backend
- Banking services integration
- Web administration panel
- Testing and documentation

TIMELINE:
Delivery within 12 weeks of signature.

PRICE AND PAYMENT:
Total price USD 15,000, payable as 30% on signature, 40% at 50% completion
and 30% on delivery.

INTELLECTUAL PROPERTY:
All rights transfer to the client once payment is complete.

WARRANTY:
60 days of bug fixing after final delivery.
"""

_RESTAURANT_CONTRACT = """WEB DEVELOPMENT AGREEMENT

PARTIES:
Developer: FreelancerPro Demo
Client: La Cocina Restaurant

SCOPE:
- Responsive website
- Online reservation system
- Digital menu
- Basic SEO

TIMELINE:
Delivery within 6 weeks of signature.

PRICE AND PAYMENT:
Total price USD 3,500, payable as 50% on signature and 50% on delivery.
"""


def build_demo_data(password_hash: Optional[str] = None) -> AppData:
    """
    Build the demo document.

    Args:
        password_hash: Hash stored for the demo user; defaults to a fresh
            hash of ``DEMO_PASSWORD`` so the demo account can log in

    Returns:
        AppData with three clients, three projects, four tasks, three
        quotes, two contracts and three team members
    """
    if password_hash is None:
        password_hash = hash_password(DEMO_PASSWORD)

    return AppData.model_validate(
        {
            "users": [
                {
                    "id": DEMO_USER_ID,
                    "email": DEMO_EMAIL,
                    "name": "Demo User",
                    "password": password_hash,
                    "role": "freelancer",
                    "createdAt": "2024-01-01T00:00:00.000Z",
                    "updatedAt": "2024-01-01T00:00:00.000Z",
                }
            ],
            "clients": [
                {
                    "id": "client-1",
                    "name": "Tech Startup Inc.",
                    "email": "contact@techstartup.com",
                    "phone": "+1 (555) 123-4567",
                    "company": "Tech Startup Inc.",
                    "status": "active",
                    "notes": "Collaborative client who always pays on time. Fintech focus.",
                    "createdAt": "2024-01-15T00:00:00.000Z",
                    "updatedAt": "2024-02-01T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                },
                {
                    "id": "client-2",
                    "name": "Maria Gonzalez",
                    "email": "maria@restaurant.com",
                    "phone": "+1 (555) 987-6543",
                    "company": "La Cocina Restaurant",
                    "status": "active",
                    "notes": "Restaurant owner who needs an online presence.",
                    "createdAt": "2024-01-20T00:00:00.000Z",
                    "updatedAt": "2024-02-05T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                },
                {
                    "id": "client-3",
                    "name": "Carlos Mendoza",
                    "email": "carlos@consulting.com",
                    "phone": "+1 (555) 456-7890",
                    "company": "Strategic Consulting",
                    "status": "prospect",
                    "notes": "Interested in a brand redesign. Meeting scheduled next week.",
                    "createdAt": "2024-02-10T00:00:00.000Z",
                    "updatedAt": "2024-02-10T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                },
            ],
            "projects": [
                {
                    "id": "project-1",
                    "name": "FinTech Mobile App",
                    "description": "Personal finance mobile app with bank integration.",
                    "status": "active",
                    "startDate": "2024-01-15T00:00:00.000Z",
                    "endDate": "2024-04-15T00:00:00.000Z",
                    "budget": 15000,
                    "progress": 65,
                    "createdAt": "2024-01-15T00:00:00.000Z",
                    "updatedAt": "2024-02-15T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "clientId": "client-1",
                },
                {
                    "id": "project-2",
                    "name": "Restaurant Website",
                    "description": "Website with online reservations and a digital menu.",
                    "status": "active",
                    "startDate": "2024-02-01T00:00:00.000Z",
                    "endDate": "2024-03-15T00:00:00.000Z",
                    "budget": 3500,
                    "progress": 40,
                    "createdAt": "2024-02-01T00:00:00.000Z",
                    "updatedAt": "2024-02-20T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "clientId": "client-2",
                },
                {
                    "id": "project-3",
                    "name": "Complete E-commerce",
                    "description": "Online store with payments and inventory management.",
                    "status": "completed",
                    "startDate": "2023-11-01T00:00:00.000Z",
                    "endDate": "2024-01-30T00:00:00.000Z",
                    "budget": 8000,
                    "progress": 100,
                    "createdAt": "2023-11-01T00:00:00.000Z",
                    "updatedAt": "2024-01-30T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "clientId": "client-1",
                },
            ],
            "tasks": [
                {
                    "id": "task-1",
                    "title": "Design app wireframes",
                    "description": "Wireframes for every main screen of the app.",
                    "status": "completed",
                    "priority": "high",
                    "dueDate": "2024-02-01T00:00:00.000Z",
                    "createdAt": "2024-01-15T00:00:00.000Z",
                    "updatedAt": "2024-01-28T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "projectId": "project-1",
                },
                {
                    "id": "task-2",
                    "title": "Implement authentication",
                    "description": "Login and registration with biometric support.",
                    "status": "in_progress",
                    "priority": "high",
                    "dueDate": "2024-02-25T00:00:00.000Z",
                    "createdAt": "2024-02-01T00:00:00.000Z",
                    "updatedAt": "2024-02-15T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "projectId": "project-1",
                },
                {
                    "id": "task-3",
                    "title": "Dish photography",
                    "description": "Photo session for the digital menu.",
                    "status": "pending",
                    "priority": "medium",
                    "dueDate": "2024-02-28T00:00:00.000Z",
                    "createdAt": "2024-02-05T00:00:00.000Z",
                    "updatedAt": "2024-02-05T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "projectId": "project-2",
                },
                {
                    "id": "task-4",
                    "title": "SEO optimisation",
                    "description": "Keywords and meta tags for the restaurant site.",
                    "status": "pending",
                    "priority": "low",
                    "dueDate": "2024-03-10T00:00:00.000Z",
                    "createdAt": "2024-02-10T00:00:00.000Z",
                    "updatedAt": "2024-02-10T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "projectId": "project-2",
                },
            ],
            "quotes": [
                {
                    "id": "quote-1",
                    "title": "Corporate Brand Redesign",
                    "description": "Logo, colour palette, typography and brand manual.",
                    "amount": 2800,
                    "status": "sent",
                    "validUntil": "2024-03-15T00:00:00.000Z",
                    "createdAt": "2024-02-10T00:00:00.000Z",
                    "updatedAt": "2024-02-10T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "clientId": "client-3",
                },
                {
                    "id": "quote-2",
                    "title": "FinTech Mobile App",
                    "description": "Full development of the iOS and Android app.",
                    "amount": 15000,
                    "status": "accepted",
                    "validUntil": "2024-01-30T00:00:00.000Z",
                    "createdAt": "2024-01-10T00:00:00.000Z",
                    "updatedAt": "2024-01-15T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "clientId": "client-1",
                },
                {
                    "id": "quote-3",
                    "title": "Website with Reservations",
                    "description": "Responsive website with booking system.",
                    "amount": 3500,
                    "status": "accepted",
                    "validUntil": "2024-02-15T00:00:00.000Z",
                    "createdAt": "2024-01-25T00:00:00.000Z",
                    "updatedAt": "2024-02-01T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "clientId": "client-2",
                },
            ],
            "contracts": [
                {
                    "id": "contract-1",
                    "title": "FinTech App Development Agreement",
                    "content": _FINTECH_CONTRACT,
                    "status": "signed",
                    "signedDate": "2024-01-15T00:00:00.000Z",
                    "createdAt": "2024-01-10T00:00:00.000Z",
                    "updatedAt": "2024-01-15T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "clientId": "client-1",
                },
                {
                    "id": "contract-2",
                    "title": "Restaurant Website Agreement",
                    "content": _RESTAURANT_CONTRACT,
                    "status": "signed",
                    "signedDate": "2024-02-01T00:00:00.000Z",
                    "createdAt": "2024-01-28T00:00:00.000Z",
                    "updatedAt": "2024-02-01T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                    "clientId": "client-2",
                },
            ],
            "teamMembers": [
                {
                    "id": "member-1",
                    "name": "Ana Rodriguez",
                    "email": "ana@freelancerpro.com",
                    "role": "UI/UX Designer",
                    "status": "active",
                    "createdAt": "2024-01-20T00:00:00.000Z",
                    "updatedAt": "2024-01-20T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                },
                {
                    "id": "member-2",
                    "name": "Roberto Silva",
                    "email": "roberto@freelancerpro.com",
                    "role": "Backend Developer",
                    "status": "active",
                    "createdAt": "2024-01-25T00:00:00.000Z",
                    "updatedAt": "2024-01-25T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                },
                {
                    "id": "member-3",
                    "name": "Laura Martinez",
                    "email": "laura@freelancerpro.com",
                    "role": "Community Manager",
                    "status": "inactive",
                    "createdAt": "2024-02-01T00:00:00.000Z",
                    "updatedAt": "2024-02-15T00:00:00.000Z",
                    "userId": DEMO_USER_ID,
                },
            ],
        }
    )
