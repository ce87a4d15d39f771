"""
Sample listings and articles loaded at startup in development.
Records go through the same validation and create path as API input.
"""

from typing import Any, Dict, List
import logging

from estate_api.storage import MemStorage
from estate_api.schemas.property import PropertyCreate
from estate_api.schemas.blog import BlogPostCreate
from estate_api.services.property import PropertyService
from estate_api.services.blog import BlogService
from estate_api.utils.validators import validate_model

logger = logging.getLogger(__name__)

IMAGE_BASE = "https://images.unsplash.com"

SAMPLE_PROPERTIES: List[Dict[str, Any]] = [
    {
        "title": "Premium Agricultural Land in Fertile Valley",
        "description": "Five acres of level, irrigated farmland with black cotton soil, "
                       "a year-round stream along the eastern boundary and a clear title.",
        "price": 2500000,
        "priceUnit": "₹",
        "priceSuffix": "/acre",
        "area": 5,
        "areaUnit": "acres",
        "location": "Nashik, Maharashtra",
        "address": "Wagholi Village, Nashik",
        "city": "Nashik",
        "state": "Maharashtra",
        "zipCode": "422003",
        "latitude": "19.9975",
        "longitude": "73.7898",
        "propertyType": "land",
        "listingStatus": "for_sale",
        "featuredImage": f"{IMAGE_BASE}/photo-1500382017468-9049fed747ef?auto=format&fit=crop&w=800&q=80",
        "isFeatured": True,
        "amenities": ["Natural Water Source", "Rich Soil", "Road Access", "Electricity Connection", "Flat Terrain", "Clear Title"],
    },
    {
        "title": "Commercial Plot Near Highway Junction",
        "description": "Corner plot with direct frontage on the NH-8 service road, zoned for "
                       "commercial use and already connected to water and power.",
        "price": 12000000,
        "priceUnit": "₹",
        "priceSuffix": "",
        "area": 10000,
        "areaUnit": "sq.ft",
        "location": "Gurgaon, Haryana",
        "address": "Sector 83, NH-8 Junction",
        "city": "Gurgaon",
        "state": "Haryana",
        "zipCode": "122004",
        "latitude": "28.4595",
        "longitude": "77.0266",
        "propertyType": "land",
        "listingStatus": "for_sale",
        "featuredImage": f"{IMAGE_BASE}/photo-1486406146926-c627a92ad1ab?auto=format&fit=crop&w=800&q=80",
        "isFeatured": True,
        "amenities": ["Highway Frontage", "Commercial Zoning", "All Utilities", "Corner Plot", "High Visibility"],
    },
    {
        "title": "Premium Residential Plot in Gated Community",
        "description": "East-facing 300 sq.yd plot inside a gated township with internal "
                       "roads, parks and a club house. Ready for immediate construction.",
        "price": 48000,
        "priceUnit": "₹",
        "priceSuffix": "/sq.yd",
        "area": 300,
        "areaUnit": "sq.yd",
        "location": "Greater Noida, Delhi NCR",
        "address": "Sector 123, Greater Noida",
        "city": "Greater Noida",
        "state": "Uttar Pradesh",
        "zipCode": "201310",
        "latitude": "28.4744",
        "longitude": "77.5040",
        "propertyType": "land",
        "listingStatus": "for_sale",
        "featuredImage": f"{IMAGE_BASE}/photo-1448630360428-65456885c650?auto=format&fit=crop&w=800&q=80",
        "isFeatured": True,
        "amenities": ["Gated Community", "24/7 Security", "Parks", "Club House", "Water Supply"],
    },
    {
        "title": "Large Agricultural Land with Water Reservoir",
        "description": "Fifteen acres in Khed taluka with a private reservoir, drip irrigation "
                       "across most of the holding and a fenced boundary.",
        "price": 35000000,
        "priceUnit": "₹",
        "priceSuffix": "",
        "area": 15,
        "areaUnit": "acres",
        "location": "Pune Rural, Maharashtra",
        "address": "Khed Taluka, Pune District",
        "city": "Pune",
        "state": "Maharashtra",
        "zipCode": "410501",
        "latitude": "18.8266",
        "longitude": "73.8777",
        "propertyType": "land",
        "listingStatus": "for_sale",
        "featuredImage": f"{IMAGE_BASE}/photo-1464226184884-fa280b87c399?auto=format&fit=crop&w=800&q=80",
        "isFeatured": False,
        "amenities": ["Water Reservoir", "Farm Road Access", "Fenced Boundary", "Irrigation System"],
    },
    {
        "title": "Industrial Land Plot Near Port",
        "description": "Two acres in the MIDC industrial area a short drive from JNPT, with a "
                       "power substation next door and heavy-vehicle access.",
        "price": 55000000,
        "priceUnit": "₹",
        "priceSuffix": "",
        "area": 2,
        "areaUnit": "acres",
        "location": "JNPT Area, Navi Mumbai",
        "address": "MIDC Industrial Area, Uran",
        "city": "Navi Mumbai",
        "state": "Maharashtra",
        "zipCode": "400702",
        "latitude": "18.9633",
        "longitude": "72.9615",
        "propertyType": "land",
        "listingStatus": "for_lease",
        "featuredImage": f"{IMAGE_BASE}/photo-1581091226825-a6a2a5aee158?auto=format&fit=crop&w=800&q=80",
        "isFeatured": False,
        "amenities": ["Industrial Zoning", "Port Proximity", "Highway Access", "Power Substation"],
    },
]

SAMPLE_BLOG_POSTS: List[Dict[str, Any]] = [
    {
        "title": "5 Land Investment Trends to Watch This Year",
        "content": "<p>Land close to new expressways keeps outperforming.</p>"
                   "<h2>1. Infrastructure corridors</h2><p>Plots within reach of announced "
                   "highways and freight corridors appreciate first.</p>"
                   "<h2>2. Managed farmland</h2><p>Buyers want farmland that someone else "
                   "tends, with a share of the harvest.</p>",
        "summary": "Where land prices are moving and which kinds of plots buyers are chasing.",
        "authorName": "Rajiv Sharma",
        "category": "Investment",
        "featuredImage": f"{IMAGE_BASE}/photo-1560520031-5deaa57a1f07?auto=format&fit=crop&w=600&h=300&q=80",
        "isFeatured": True,
    },
    {
        "title": "Tax Benefits of Buying Land in India",
        "content": "<p>Agricultural land outside municipal limits is not a capital asset "
                   "for income tax purposes.</p><h2>Capital gains</h2><p>Long-term gains on "
                   "other land can be reinvested to claim an exemption.</p>",
        "summary": "What changes for your tax return when you buy agricultural or urban land.",
        "authorName": "Priya Iyer",
        "category": "Finance",
        "featuredImage": f"{IMAGE_BASE}/photo-1554224155-6726b3ff858f?auto=format&fit=crop&w=600&h=300&q=80",
        "isFeatured": True,
    },
    {
        "title": "Checklist Before You Sign for a Plot",
        "content": "<ul><li>Verify the 7/12 extract and mutation entries</li>"
                   "<li>Confirm the land use zoning</li><li>Walk the boundary with a "
                   "surveyor</li><li>Check road access is a public right of way</li></ul>",
        "summary": "The documents and site checks that protect a first-time land buyer.",
        "authorName": "Vikram Mehta",
        "category": "Guides",
        "featuredImage": f"{IMAGE_BASE}/photo-1450101499163-c8848c66ca85?auto=format&fit=crop&w=600&h=300&q=80",
        "isFeatured": True,
    },
]


async def seed_sample_data(storage: MemStorage) -> None:
    """
    Load sample listings and articles into an empty store.

    Tables that already hold records are left alone.

    Raises:
        ValidationError: If a sample record no longer matches its schema
    """
    property_service = PropertyService(storage)
    blog_service = BlogService(storage)

    if await storage.properties.count() == 0:
        for raw in SAMPLE_PROPERTIES:
            await property_service.create_property(validate_model(PropertyCreate, raw))
        logger.info(f"Seeded {len(SAMPLE_PROPERTIES)} sample properties")

    if await storage.blog_posts.count() == 0:
        for raw in SAMPLE_BLOG_POSTS:
            await blog_service.create_post(validate_model(BlogPostCreate, raw))
        logger.info(f"Seeded {len(SAMPLE_BLOG_POSTS)} sample blog posts")
