"""
Renderer HTML — un fragment par bloc, dispatch par type via un registry.

  render_block(block)      →  fragment HTML d'un bloc (canvas, aperçu, publication)
  render_canvas(document)  →  canvas de l'éditeur (wrappers sélection / verrou / masqué)

Le registry type → (modèle de props, fonction) est rempli une seule fois à
l'import par le décorateur @renderer. Un type inconnu rend la carte
"Unknown block type", jamais d'exception.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Tuple, Type

from ..blocks import (
    BlockProps, coerce_props, video_embed_url,
    HeroProps, TextProps, FeaturesProps, GalleryProps, VideoProps, ImageProps,
    ColumnsProps, SpacerProps, TestimonialsProps, TeamProps, HoursProps, MapProps,
    FormProps, NewsletterProps, ProductsProps, SectionProps, CTAProps,
)
from ..blocks.columns import GAP_SIZES
from ..blocks.hero import HERO_GRADIENT
from ..blocks.hours import WEEK_DAYS
from ..blocks.spacer import SPACER_HEIGHTS
from ..blocks.testimonial import MAX_RATING, TestimonialItem
from ..core.schemas import PageBlock, PageDocument
from .base import classes, css_url, css_value, esc, rich, style_attr, url
from .carousel import Carousel

log = logging.getLogger(__name__)

EMPTY_CANVAS = """<div class="canvas__empty">
  <h3 class="canvas__empty-title">Start Building Your Page</h3>
  <p class="canvas__empty-text">Drag blocks from the library on the left to start building your website. You can add text, images, forms, and more.</p>
</div>"""

VIDEO_PLACEHOLDER = "Add a video URL to display content"
IMAGE_PLACEHOLDER = "Add an image URL to display content"

_ALIGN_ITEMS = {"top": "start", "center": "center", "bottom": "end"}


@dataclass(frozen=True)
class RenderContext:
    block: PageBlock
    carousel_index: int = 0


RenderFn = Callable[[BlockProps, RenderContext], str]

_RENDERERS: Dict[str, Tuple[Type[BlockProps], RenderFn]] = {}


def renderer(block_type: str, model: Type[BlockProps]):
    """Enregistre la fonction de rendu d'un type de bloc."""
    def register(fn: RenderFn) -> RenderFn:
        _RENDERERS[block_type] = (model, fn)
        return fn
    return register


def has_renderer(block_type: str) -> bool:
    return block_type in _RENDERERS


def registered_types() -> Tuple[str, ...]:
    return tuple(_RENDERERS)


# ── Points d'entrée publics ─────────────────────────────────────────────────

def render_block(block: PageBlock, *, carousel_index: int = 0, publish: bool = False) -> str:
    """
    Fragment HTML d'un bloc.

    Props absentes / invalides → valeurs par défaut du type. Une erreur dans
    un renderer est loggée et remplacée par la carte de repli (rien en
    publication) pour ne pas casser les blocs voisins.
    """
    entry = _RENDERERS.get(block.type)
    if entry is None:
        return render_unknown(block.type)

    model, fn = entry
    try:
        props = coerce_props(model, block.props)
        inner = fn(props, RenderContext(block=block, carousel_index=carousel_index))
    except Exception:
        log.exception("Rendu du bloc %s (%s) en échec", block.id, block.type)
        return "" if publish else render_unknown(block.type)

    container = _container_style(block)
    if container:
        return f'<div class="block-style"{container}>\n{inner}\n</div>'
    return inner


def render_canvas(
    document: PageDocument,
    *,
    selected_id: Optional[str] = None,
    preview: bool = False,
    carousel_indexes: Optional[Mapping[str, int]] = None,
) -> str:
    """
    Canvas de l'éditeur.

    Mode édition : chaque bloc est enveloppé (data-block-index, data-block-id,
    classes selected / locked / hidden) ; les blocs masqués restent affichés
    atténués. Mode aperçu : blocs masqués omis, pas de wrapper.
    """
    indexes = carousel_indexes or {}
    if not document.blocks:
        return '<div class="canvas canvas--preview"></div>' if preview else f'<div class="canvas">\n{EMPTY_CANVAS}\n</div>'

    parts = []
    for i, block in enumerate(document.blocks):
        if preview and not block.is_visible:
            continue
        html = render_block(block, carousel_index=indexes.get(block.id, 0))
        if preview:
            parts.append(html)
            continue
        cls = classes(
            "canvas__block",
            "canvas__block--selected" if block.id == selected_id else None,
            "canvas__block--locked" if block.is_locked else None,
            "canvas__block--hidden" if not block.is_visible else None,
        )
        parts.append(
            f'<div class="{cls}" data-block-index="{i}" data-block-id="{esc(block.id)}">\n{html}\n</div>'
        )

    body = "\n".join(parts)
    return f'<div class="{classes("canvas", "canvas--preview" if preview else None)}">\n{body}\n</div>'


def render_unknown(block_type: str) -> str:
    return f"""<div class="block-fallback">
  <p class="block-fallback__text">Unknown block type: {esc(block_type)}</p>
</div>"""


# ── Helpers ─────────────────────────────────────────────────────────────────

def _container_style(block: PageBlock) -> str:
    """Style conteneur de la variante site-builder → style inline."""
    s = block.style
    if s is None:
        return ""
    extra = s.model_extra or {}
    return style_attr({
        "padding":          css_value(s.padding),
        "margin":           css_value(s.margin),
        "background-color": css_value(s.background_color),
        "border-radius":    css_value(s.border_radius),
        "box-shadow":       css_value(s.box_shadow),
        "color":            css_value(extra.get("textColor") or extra.get("color")),
    })


def _text_or_default(props: BlockProps, name: str) -> str:
    """Chaîne vide traitée comme absente (retour à la valeur par défaut du type)."""
    return getattr(props, name) or type(props).model_fields[name].default


def _grid_style(columns: int) -> str:
    return f' style="grid-template-columns:repeat({columns}, minmax(0, 1fr))"'


def _button(label, href, css_class: str) -> str:
    if not label:
        return ""
    return f'<a href="{url(href)}" class="{css_class}">{esc(label)}</a>'


def _stars(rating: Optional[int]) -> str:
    if rating is None:
        return ""
    n = max(0, min(MAX_RATING, rating))
    return (
        f'<div class="stars" aria-label="{n} / {MAX_RATING}">'
        f'{"★" * n}{"☆" * (MAX_RATING - n)}</div>'
    )


# ── Contenu ─────────────────────────────────────────────────────────────────

@renderer("hero", HeroProps)
def render_hero(p: HeroProps, ctx: RenderContext) -> str:
    bg_image = css_url(p.background_image)
    inline = {"color": css_value(p.text_color)}
    if bg_image:
        inline["background-image"] = f"url('{bg_image}')"
    else:
        inline["background"] = css_value(p.background_color, HERO_GRADIENT)

    overlay = ""
    if bg_image:
        overlay = f'<div class="hero__overlay" style="opacity:{p.overlay_opacity:g}"></div>\n  '

    button = _button(_text_or_default(p, "button_text"), p.button_link, "btn btn-primary hero__btn")
    return f"""<div class="hero hero--text-{p.text_align}"{style_attr(inline)}>
  {overlay}<div class="hero__content">
    <h1 class="hero__title">{esc(_text_or_default(p, "title"))}</h1>
    <p class="hero__subtitle">{esc(_text_or_default(p, "subtitle"))}</p>
    {button}
  </div>
</div>"""


@renderer("text", TextProps)
def render_text(p: TextProps, ctx: RenderContext) -> str:
    inline = style_attr({"max-width": css_value(p.max_width, "100%")})
    return f"""<div class="text-block text-block--align-{p.text_align}"{inline}>
{rich(_text_or_default(p, "content"))}
</div>"""


@renderer("features", FeaturesProps)
def render_features(p: FeaturesProps, ctx: RenderContext) -> str:
    items_html = ""
    for item in p.features:
        icon = ""
        if p.show_icons:
            icon = f'<div class="features__icon" data-icon="{esc(item.icon)}" aria-hidden="true">★</div>\n  '
        items_html += f"""<div class="features__card">
  {icon}<h3 class="features__title">{esc(item.title)}</h3>
  <p class="features__description">{esc(item.description)}</p>
</div>"""

    return f"""<div class="features">
  <div class="features__grid features__grid--cols-{p.columns}"{_grid_style(p.columns)}>{items_html}</div>
</div>"""


@renderer("cta", CTAProps)
def render_cta(p: CTAProps, ctx: RenderContext) -> str:
    subtitle = f'<p class="cta-block__subtitle">{esc(p.subtitle)}</p>' if p.subtitle else ""
    button = _button(_text_or_default(p, "button_text"), p.button_link, "btn btn-primary cta-block__btn")
    return f"""<div class="cta-block">
  <div class="cta-block__inner">
    <h2 class="cta-block__title">{esc(_text_or_default(p, "title"))}</h2>
    {subtitle}
    {button}
  </div>
</div>"""


# ── Médias ──────────────────────────────────────────────────────────────────

@renderer("gallery", GalleryProps)
def render_gallery(p: GalleryProps, ctx: RenderContext) -> str:
    items_html = ""
    for i, image in enumerate(p.images):
        caption = ""
        if p.show_captions and image.caption:
            caption = f'\n  <figcaption class="gallery__caption">{esc(image.caption)}</figcaption>'
        alt = image.alt or f"Gallery image {i + 1}"
        items_html += f"""<figure class="gallery__item">
  <img src="{url(image.src, "")}" alt="{esc(alt)}" loading="lazy">{caption}
</figure>"""

    cls = classes("gallery", f"gallery--{p.layout}", "gallery--empty" if not p.images else None)
    return f"""<div class="{cls}">
  <div class="gallery__grid"{_grid_style(p.columns)}>{items_html}</div>
</div>"""


@renderer("video", VideoProps)
def render_video(p: VideoProps, ctx: RenderContext) -> str:
    ratio = style_attr({"aspect-ratio": css_value(p.css_aspect_ratio, "16/9")})
    if not p.video_url.strip():
        return f"""<div class="video">
  <div class="video__frame video__frame--empty"{ratio}>
    <p class="video__placeholder">{VIDEO_PLACEHOLDER}</p>
  </div>
</div>"""

    src = video_embed_url(p.video_url.strip())
    params = []
    if p.autoplay:
        params.append("autoplay=1")
    if not p.controls:
        params.append("controls=0")
    if params:
        src += ("&" if "?" in src else "?") + "&".join(params)

    allow = ' allow="autoplay; fullscreen"' if p.autoplay else ""
    return f"""<div class="video">
  <div class="video__frame"{ratio}>
    <iframe src="{url(src, "")}" title="Embedded video"{allow} allowfullscreen></iframe>
  </div>
</div>"""


@renderer("image", ImageProps)
def render_image(p: ImageProps, ctx: RenderContext) -> str:
    title = f'<h3 class="image-block__title">{esc(p.title)}</h3>\n  ' if p.title else ""
    if not p.image_url:
        body = f'<p class="image-block__placeholder">{IMAGE_PLACEHOLDER}</p>'
    else:
        body = f'<img src="{url(p.image_url, "")}" alt="{esc(p.image_alt)}">'
    return f"""<figure class="image-block">
  {title}<div class="image-block__wrapper">{body}</div>
</figure>"""


# ── Mise en page ────────────────────────────────────────────────────────────

@renderer("columns", ColumnsProps)
def render_columns(p: ColumnsProps, ctx: RenderContext) -> str:
    inline = style_attr({
        "grid-template-columns": f"repeat({p.columns}, minmax(0, 1fr))",
        "gap": GAP_SIZES[p.gap],
        "align-items": _ALIGN_ITEMS[p.vertical_align],
    })
    return f"""<div class="columns columns--gap-{p.gap}"{inline}>
  <div class="columns__cell">{rich(_text_or_default(p, "left_content"))}</div>
  <div class="columns__cell">{rich(_text_or_default(p, "right_content"))}</div>
</div>"""


@renderer("spacer", SpacerProps)
def render_spacer(p: SpacerProps, ctx: RenderContext) -> str:
    inline = style_attr({
        "height": SPACER_HEIGHTS[p.height],
        "background-color": css_value(p.background_color, "transparent"),
    })
    return f'<div class="spacer spacer--{p.height}"{inline}></div>'


# ── Business ────────────────────────────────────────────────────────────────

def _testimonial_author(t: TestimonialItem, p: TestimonialsProps) -> str:
    avatar = ""
    if p.show_avatars and t.avatar:
        avatar = f'<img src="{url(t.avatar, "")}" alt="{esc(t.name)}" class="testimonials__avatar">'
    stars = _stars(t.rating) if p.show_ratings else ""
    return f"""<div class="testimonials__author">
    {avatar}
    <div>
      <p class="testimonials__name">{esc(t.name)}</p>
      <p class="testimonials__company">{esc(t.company)}</p>
      {stars}
    </div>
  </div>"""


@renderer("testimonials", TestimonialsProps)
def render_testimonials(p: TestimonialsProps, ctx: RenderContext) -> str:
    if not p.testimonials:
        return '<div class="testimonials testimonials--empty"></div>'

    if p.layout == "carousel":
        carousel = Carousel(len(p.testimonials), ctx.carousel_index)
        current = p.testimonials[carousel.index]
        controls = ""
        if carousel.has_controls:
            prev_disabled = "" if carousel.has_previous else " disabled"
            next_disabled = "" if carousel.has_next else " disabled"
            controls = f"""
  <div class="testimonials__controls">
    <button type="button" class="testimonials__prev" data-carousel="prev" aria-label="Previous"{prev_disabled}>‹</button>
    <button type="button" class="testimonials__next" data-carousel="next" aria-label="Next"{next_disabled}>›</button>
  </div>"""
        return f"""<div class="testimonials testimonials--carousel" data-carousel-index="{carousel.index}">
  <blockquote class="testimonials__quote">“{esc(current.content)}”</blockquote>
  {_testimonial_author(current, p)}{controls}
</div>"""

    cards = "".join(
        f"""<div class="testimonials__card">
  <p class="testimonials__content">“{esc(t.content)}”</p>
  {_testimonial_author(t, p)}
</div>"""
        for t in p.testimonials
    )
    return f"""<div class="testimonials testimonials--grid">
  <div class="testimonials__grid">{cards}</div>
</div>"""


@renderer("team", TeamProps)
def render_team(p: TeamProps, ctx: RenderContext) -> str:
    cards_html = ""
    for m in p.members:
        photo = f'<img src="{url(m.photo, "")}" alt="{esc(m.name)}" class="team__photo">' if m.photo else ""
        bio = f'<p class="team__bio">{esc(m.bio)}</p>' if p.show_bios and m.bio else ""
        social = ""
        if p.show_social and m.social:
            links = "".join(
                f'<a href="{url(href)}" class="team__social-link" data-network="{esc(network)}">{esc(network)}</a>'
                for network, href in m.social.items()
            )
            social = f'<div class="team__social">{links}</div>'
        cards_html += f"""<div class="team__card">
  {photo}
  <h3 class="team__name">{esc(m.name)}</h3>
  <p class="team__role">{esc(m.role)}</p>
  {bio}
  {social}
</div>"""

    return f"""<div class="team team--{esc(p.layout)}">
  <div class="team__grid">{cards_html}</div>
</div>"""


@renderer("hours", HoursProps)
def render_hours(p: HoursProps, ctx: RenderContext) -> str:
    rows = "".join(
        f'<div class="hours__row"><span class="hours__day">{day.capitalize()}</span>'
        f'<span class="hours__time">{esc(p.for_day(day))}</span></div>'
        for day in WEEK_DAYS
    )
    tz = f'\n  <p class="hours__timezone">All times in {esc(p.timezone)}</p>' if p.timezone else ""
    return f"""<div class="hours">
  <h3 class="hours__title">Business Hours</h3>
  <div class="hours__list">{rows}</div>{tz}
</div>"""


@renderer("map", MapProps)
def render_map(p: MapProps, ctx: RenderContext) -> str:
    coords = ""
    if p.latitude is not None and p.longitude is not None:
        coords = f' data-lat="{p.latitude:g}" data-lng="{p.longitude:g}" data-zoom="{p.zoom}"'
    marker = ' data-marker="true"' if p.show_marker else ""
    return f"""<div class="map" style="height:{p.height}px"{coords}{marker}>
  <p class="map__title">Interactive Map</p>
  <p class="map__address">{esc(p.address)}</p>
</div>"""


def _section(p: SectionProps, ctx: RenderContext) -> str:
    inline = style_attr({"color": css_value(p.text_color)})
    subtitle = f'<p class="section__subtitle">{esc(p.subtitle)}</p>' if p.subtitle else ""
    text = f'<p class="section__text">{esc(p.text)}</p>' if p.text else ""
    button = _button(p.button_text, p.button_link, "btn btn-primary section__btn")
    return f"""<section class="section section--{ctx.block.type} section--align-{p.alignment}"{inline}>
  <div class="container">
    <h2 class="section__title">{esc(p.title)}</h2>
    {subtitle}
    {text}
    {button}
  </div>
</section>"""


renderer("services", SectionProps)(_section)
renderer("contact", SectionProps)(_section)


# ── Formulaires ─────────────────────────────────────────────────────────────


@renderer("form", FormProps)
def render_form(p: FormProps, ctx: RenderContext) -> str:
    fields_html = ""
    for f in p.fields:
        required = " required" if f.required else ""
        star = '<span class="form__required">*</span>' if f.required else ""
        placeholder = esc(f.placeholder or f.label)
        if f.type == "textarea":
            control = f'<textarea name="{esc(f.name)}" rows="{f.rows}" placeholder="{placeholder}"{required}></textarea>'
        else:
            control = f'<input type="{f.type}" name="{esc(f.name)}" placeholder="{placeholder}"{required}>'
        fields_html += f"""<div class="form__field">
  <label class="form__label">{esc(f.label)}{star}</label>
  {control}
</div>"""

    return f"""<div class="form form--{p.layout}">
  <h3 class="form__title">Contact Us</h3>
  <form method="post" data-success-message="{esc(p.success_message)}">
    {fields_html}
    <button type="submit" class="btn btn-primary form__submit">{esc(_text_or_default(p, "submit_text"))}</button>
  </form>
</div>"""


@renderer("newsletter", NewsletterProps)
def render_newsletter(p: NewsletterProps, ctx: RenderContext) -> str:
    description = f'<p class="newsletter__description">{esc(p.description)}</p>' if p.description else ""
    return f"""<div class="newsletter newsletter--{p.layout}">
  <h3 class="newsletter__title">{esc(_text_or_default(p, "title"))}</h3>
  {description}
  <form class="newsletter__form" method="post">
    <input type="email" name="email" placeholder="{esc(_text_or_default(p, "placeholder"))}" required>
    <button type="submit" class="btn btn-primary">{esc(_text_or_default(p, "button_text"))}</button>
  </form>
</div>"""


# ── E-commerce ──────────────────────────────────────────────────────────────

@renderer("products", ProductsProps)
def render_products(p: ProductsProps, ctx: RenderContext) -> str:
    cards_html = ""
    for product in p.products:
        image = f'<img src="{url(product.image, "")}" alt="{esc(product.name)}">' if product.image else ""
        price = f'<p class="products__price">{esc(product.price)}</p>' if p.show_prices and product.price else ""
        desc = f'<p class="products__description">{esc(product.description)}</p>' if p.show_descriptions and product.description else ""
        cards_html += f"""<div class="products__card">
  <div class="products__image">{image}</div>
  <h3 class="products__name">{esc(product.name)}</h3>
  {price}
  {desc}
  <button type="button" class="btn btn-primary products__btn">Add to Cart</button>
</div>"""

    return f"""<div class="products products--{esc(p.layout)}">
  <div class="products__grid">{cards_html}</div>
</div>"""
