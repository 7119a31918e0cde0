"""Sample hotel profile and room inventory used to seed `HotelStore`."""

from voicebot.core.types import HotelProfile, Room


SAMPLE_HOTEL = HotelProfile(
    name="Simplotel Grand Hotel",
    address="MG Road, Bangalore, Karnataka 560001, India",
    phone="+91-80-12345678",
    email="info@simplotelgrand.com",
    website="www.simplotelgrand.com",
    description="A luxury hotel in the heart of Bangalore, offering world-class amenities and services.",
    amenities=(
        "Free High-Speed WiFi",
        "Swimming Pool",
        "24/7 Fitness Center",
        "Spa & Wellness Center",
        "Multi-Cuisine Restaurant",
        "Bar & Lounge",
        "Conference Rooms",
        "Business Center",
        "Airport Shuttle Service",
        "Valet Parking",
        "Concierge Service",
        "Room Service 24/7",
        "Laundry Service",
        "Travel Desk",
    ),
    check_in_time="2:00 PM",
    check_out_time="11:00 AM",
)


SAMPLE_ROOMS = (
    Room(
        id="R001",
        type="Deluxe Room",
        price=3500,
        capacity=2,
        size="300 sq ft",
        description="Comfortable room with modern amenities, perfect for couples",
        amenities=("King Size Bed", "City View", "Work Desk", "Smart TV", "Mini Bar"),
        available=5,
    ),
    Room(
        id="R002",
        type="Executive Suite",
        price=6500,
        capacity=3,
        size="500 sq ft",
        description="Spacious suite with separate living area, ideal for business travelers",
        amenities=(
            "King Size Bed", "Living Room", "City View", "Work Station",
            "Smart TV", "Mini Bar", "Coffee Maker",
        ),
        available=3,
    ),
    Room(
        id="R003",
        type="Family Room",
        price=5000,
        capacity=4,
        size="450 sq ft",
        description="Perfect for families with extra beds and kid-friendly amenities",
        amenities=("2 Queen Beds", "City View", "Smart TV", "Mini Fridge", "Extra Bedding"),
        available=4,
    ),
    Room(
        id="R004",
        type="Presidential Suite",
        price=12000,
        capacity=4,
        size="1000 sq ft",
        description="Luxurious suite with premium amenities and stunning city views",
        amenities=(
            "Master Bedroom", "Living Room", "Dining Area", "Panoramic View",
            "Jacuzzi", "Butler Service", "Premium Bar",
        ),
        available=1,
    ),
)
