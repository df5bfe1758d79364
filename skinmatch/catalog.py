from typing import Dict, List

# Seed catalog, loaded once into storage with ids assigned in this order.
SAMPLE_PRODUCTS: List[Dict] = [
    {
        "name": "Radiance Face Cream",
        "description": "Hydrating moisturizer for all skin types",
        "category": "moisturizer",
        "image_url": "https://images.unsplash.com/photo-1612817288484-6f916006741a",
        "price": 2999,
        "benefits": ["Hydration", "Brightening", "Anti-aging"],
        "ingredients": ["Hyaluronic Acid", "Vitamin C", "Peptides"],
        "suitable_for": ["Dry Skin", "Normal Skin", "Combination Skin"],
    },
    {
        "name": "Natural Glow Serum",
        "description": "Vitamin C enriched brightening serum",
        "category": "serum",
        "image_url": "https://images.unsplash.com/photo-1515688594390-b649af70d282",
        "price": 3499,
        "benefits": ["Brightening", "Even Tone", "Antioxidant Protection"],
        "ingredients": ["Vitamin C", "Niacinamide", "Green Tea Extract"],
        "suitable_for": ["All Skin Types", "Dull Skin", "Hyperpigmentation"],
    },
    {
        "name": "Gentle Cleansing Foam",
        "description": "pH balanced facial cleanser",
        "category": "cleanser",
        "image_url": "https://images.unsplash.com/photo-1608068811588-3a67006b7489",
        "price": 1999,
        "benefits": ["Gentle Cleansing", "pH Balanced", "Non-drying"],
        "ingredients": ["Glycerin", "Chamomile", "Aloe Vera"],
        "suitable_for": ["Sensitive Skin", "All Skin Types"],
    },
    {
        "name": "Youth Restore Night Cream",
        "description": "Anti-aging night treatment",
        "category": "moisturizer",
        "image_url": "https://images.unsplash.com/photo-1586220742613-b731f66f7743",
        "price": 4999,
        "benefits": ["Anti-aging", "Skin Repair", "Moisture Barrier Support"],
        "ingredients": ["Retinol", "Ceramides", "Peptides"],
        "suitable_for": ["Mature Skin", "Fine Lines", "Dry Skin"],
    },
]
