"""Demo accounts and catalogue used by POST /api/seed."""

DEMO_USERS = [
    {"email": "user@sanor.com", "name": "Demo User", "password": "user123", "role": "user"},
    {"email": "admin@sanor.com", "name": "Admin User", "password": "admin123", "role": "admin"},
]

_IMG = "https://images.unsplash.com/photo-{}?w=400&h={}&fit=crop"

CATEGORIES = [
    {"name": "Sarees", "slug": "sarees", "description": "Traditional & designer sarees", "image_url": _IMG.format("1610030469983-98e550d6193c", 400)},
    {"name": "Kurtis", "slug": "kurtis", "description": "Elegant kurtis & kurtas", "image_url": _IMG.format("1594938298603-c8148c4dae35", 400)},
    {"name": "Tops", "slug": "tops", "description": "Trendy tops & blouses", "image_url": _IMG.format("1564257631407-4deb1f99d992", 400)},
    {"name": "Jeans", "slug": "jeans", "description": "Stylish jeans & denims", "image_url": _IMG.format("1542272604-787c3835535d", 400)},
    {"name": "Dresses", "slug": "dresses", "description": "Beautiful dresses for every occasion", "image_url": _IMG.format("1572804013309-59a88b7e92f1", 400)},
    {"name": "Lehengas", "slug": "lehengas", "description": "Bridal & party lehengas", "image_url": _IMG.format("1583391733956-3750e0ff4e8b", 400)},
    {"name": "Bags", "slug": "bags", "description": "Handbags, clutches & totes", "image_url": _IMG.format("1548036328-c9fa89d128fa", 400)},
    {"name": "Jewelry", "slug": "jewelry", "description": "Earrings, necklaces & more", "image_url": _IMG.format("1599643478518-a784e5dc4c8f", 400)},
    {"name": "Footwear", "slug": "footwear", "description": "Heels, flats & sandals", "image_url": _IMG.format("1543163521-1bf539c55dd2", 400)},
    {"name": "Ethnic Wear", "slug": "ethnic-wear", "description": "Traditional Indian wear", "image_url": _IMG.format("1583391733956-3750e0ff4e8b", 400)},
]


def _p(name, slug, description, price, category, photo, sizes, colors, original_price=None, featured=False, new_arrival=False):
    return {
        "name": name,
        "slug": slug,
        "description": description,
        "price": price,
        "original_price": original_price,
        "category": category,
        "image_url": _IMG.format(photo, 500),
        "sizes": sizes,
        "colors": colors,
        "featured": featured,
        "new_arrival": new_arrival,
    }


# "category" holds the category slug; it is resolved to an id at seed time
PRODUCTS = [
    _p("Pink Banarasi Silk Saree", "pink-banarasi-silk-saree", "Elegant pink Banarasi silk saree with golden zari work", "4999.00", "sarees", "1610030469983-98e550d6193c", "Free Size", "Pink,Magenta,Red", original_price="6999.00", featured=True, new_arrival=True),
    _p("Purple Chiffon Saree", "purple-chiffon-saree", "Lightweight purple chiffon saree perfect for parties", "2499.00", "sarees", "1617627143750-d86bc21e42bb", "Free Size", "Purple,Lavender", featured=True),
    _p("White Cotton Saree", "white-cotton-saree", "Pure white cotton saree for daily wear", "1299.00", "sarees", "1602216056096-3b40cc0c9944", "Free Size", "White,Off-White", new_arrival=True),
    _p("Floral Print Anarkali Kurti", "floral-anarkali-kurti", "Beautiful floral print Anarkali style kurti", "1499.00", "kurtis", "1594938298603-c8148c4dae35", "S,M,L,XL,XXL", "Pink,Yellow,Blue", original_price="1999.00", featured=True),
    _p("Cotton Straight Kurti", "cotton-straight-kurti", "Comfortable cotton straight cut kurti", "899.00", "kurtis", "1583391733981-8b530c8a89c0", "S,M,L,XL", "White,Black,Navy", new_arrival=True),
    _p("Embroidered A-Line Kurti", "embroidered-aline-kurti", "Elegant A-line kurti with thread embroidery", "1799.00", "kurtis", "1614252369475-531eba835eb1", "S,M,L,XL", "Maroon,Green,Purple"),
    _p("Pink Ruffle Top", "pink-ruffle-top", "Trendy pink top with ruffle details", "799.00", "tops", "1564257631407-4deb1f99d992", "XS,S,M,L,XL", "Pink,White,Black", original_price="1199.00", featured=True, new_arrival=True),
    _p("White Crop Top", "white-crop-top", "Stylish white crop top for casual wear", "599.00", "tops", "1503342217505-b0a15ec3261c", "XS,S,M,L", "White,Black,Pink"),
    _p("Lavender Peplum Top", "lavender-peplum-top", "Elegant lavender peplum style top", "999.00", "tops", "1551163943-3f6a855d1153", "S,M,L,XL", "Lavender,Pink,Mint", featured=True),
    _p("Floral Print Blouse", "floral-print-blouse", "Beautiful floral print casual blouse", "899.00", "tops", "1562157873-818bc0726f68", "S,M,L,XL", "Multicolor", new_arrival=True),
    _p("High Waist Skinny Jeans", "high-waist-skinny-jeans", "Flattering high waist skinny fit jeans", "1499.00", "jeans", "1542272604-787c3835535d", "26,28,30,32,34", "Blue,Black,Grey", original_price="1999.00", featured=True),
    _p("Mom Fit Jeans", "mom-fit-jeans", "Comfortable mom fit relaxed jeans", "1299.00", "jeans", "1541099649105-f69ad21f3246", "26,28,30,32,34", "Light Blue,Medium Blue", new_arrival=True),
    _p("Wide Leg Palazzo Jeans", "wide-leg-palazzo-jeans", "Trendy wide leg palazzo style jeans", "1699.00", "jeans", "1604176354204-9268737828e4", "26,28,30,32", "Dark Blue,Black"),
    _p("Ripped Boyfriend Jeans", "ripped-boyfriend-jeans", "Stylish ripped boyfriend fit jeans", "1599.00", "jeans", "1582418702059-97ebafb35d09", "26,28,30,32", "Blue,Light Blue", original_price="2199.00", featured=True),
    _p("Pink Floral Maxi Dress", "pink-floral-maxi-dress", "Gorgeous pink floral print maxi dress", "2499.00", "dresses", "1572804013309-59a88b7e92f1", "XS,S,M,L,XL", "Pink,Blue,Yellow", original_price="3499.00", featured=True, new_arrival=True),
    _p("Little Black Dress", "little-black-dress", "Classic little black dress for parties", "1999.00", "dresses", "1595777457583-95e059d581b8", "XS,S,M,L", "Black", featured=True),
    _p("Lavender Midi Dress", "lavender-midi-dress", "Elegant lavender midi dress", "1799.00", "dresses", "1515372039744-b8f02a3ae446", "S,M,L,XL", "Lavender,Pink,Mint"),
    _p("Summer Wrap Dress", "summer-wrap-dress", "Light and breezy summer wrap dress", "1599.00", "dresses", "1496747611176-843222e1e57c", "S,M,L", "White,Yellow,Coral", new_arrival=True),
    _p("Bridal Red Lehenga", "bridal-red-lehenga", "Stunning bridal red lehenga with heavy embroidery", "24999.00", "lehengas", "1583391733956-3750e0ff4e8b", "S,M,L,XL", "Red,Maroon", original_price="34999.00", featured=True),
    _p("Pink Party Lehenga", "pink-party-lehenga", "Beautiful pink lehenga for parties", "8999.00", "lehengas", "1610030469983-98e550d6193c", "S,M,L,XL", "Pink,Peach", new_arrival=True),
    _p("Pink Leather Tote Bag", "pink-leather-tote", "Spacious pink leather tote bag", "2999.00", "bags", "1548036328-c9fa89d128fa", "One Size", "Pink,Black,Brown", original_price="3999.00", featured=True),
    _p("Lavender Sling Bag", "lavender-sling-bag", "Cute lavender sling bag for daily use", "1499.00", "bags", "1584917865442-de89df76afd3", "One Size", "Lavender,White,Pink", new_arrival=True),
    _p("Black Clutch", "black-clutch", "Elegant black clutch for evening parties", "999.00", "bags", "1566150905458-1bf1fc113f0d", "One Size", "Black,Gold,Silver"),
    _p("Pearl Drop Earrings", "pearl-drop-earrings", "Elegant pearl drop earrings", "799.00", "jewelry", "1599643478518-a784e5dc4c8f", "One Size", "Gold,Silver", featured=True),
    _p("Pink Stone Necklace", "pink-stone-necklace", "Beautiful pink stone statement necklace", "1299.00", "jewelry", "1515562141207-7a88fb7ce338", "One Size", "Pink,Purple", new_arrival=True),
    _p("Kundan Jewelry Set", "kundan-jewelry-set", "Traditional kundan necklace set", "3499.00", "jewelry", "1611591437281-460bfbe1220a", "One Size", "Gold,Multicolor", original_price="4999.00"),
    _p("Pink Block Heels", "pink-block-heels", "Comfortable pink block heels", "1799.00", "footwear", "1543163521-1bf539c55dd2", "36,37,38,39,40,41", "Pink,Nude,Black", original_price="2499.00", featured=True),
    _p("White Sneakers", "white-sneakers", "Classic white sneakers for casual wear", "1499.00", "footwear", "1560769629-975ec94e6a86", "36,37,38,39,40", "White,Pink,Black", new_arrival=True),
    _p("Embellished Flats", "embellished-flats", "Pretty embellished flat sandals", "999.00", "footwear", "1603487742131-4160ec999306", "36,37,38,39,40", "Gold,Silver,Rose Gold"),
]
